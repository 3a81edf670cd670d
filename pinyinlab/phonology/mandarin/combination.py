from typing import Any, Iterator, NamedTuple, Optional, Tuple, Type, TypeVar

from .syllable import MandarinFinal, MandarinInitial, MandarinMedial
from .tables import INITIALS, MEDIALS, UMLAUT_ELIDING_INITIALS, VALID_COMBINATIONS, VALID_TRIPLES


class Combination(NamedTuple):
    ok: bool
    syllable: Optional[str]


INVALID = Combination(False, None)

_E = TypeVar('_E', MandarinInitial, MandarinMedial, MandarinFinal)


def _coerce(enum_cls: Type[_E], value: Any) -> Optional[_E]:
    if isinstance(value, enum_cls):
        return value

    if value is None:
        value = ''
    elif not isinstance(value, str):
        return None

    value = value.lower().replace('u:', 'ü').replace('v', 'ü')

    try:
        return enum_cls(value)
    except ValueError:
        return None


def resolve_triple(initial, final, medial=None) -> Optional[Tuple[MandarinInitial, MandarinMedial, MandarinFinal]]:
    initial = _coerce(MandarinInitial, initial)
    medial = _coerce(MandarinMedial, medial)
    final = _coerce(MandarinFinal, final)

    if initial is None or medial is None or final is None:
        return None

    return initial, medial, final


def _is_registered(initial: MandarinInitial, final: MandarinFinal, medial: MandarinMedial) -> bool:
    if medial is MandarinMedial._:
        return final in VALID_COMBINATIONS.get(initial, ())

    return initial in VALID_TRIPLES.get(medial, {}).get(final, ())


def spell(initial: MandarinInitial, final: MandarinFinal, medial: MandarinMedial = MandarinMedial._) -> str:
    """Canonical spelling of a triple, without checking that it is legal."""
    rest = medial.value + final.value

    if initial in UMLAUT_ELIDING_INITIALS and rest.startswith('ü'):
        rest = 'u' + rest[1:]

    return initial.value + rest


def validate(initial, final, medial=None) -> Combination:
    """Check an (initial, final, medial) triple and build its written form.

    Arguments may be enum members or their spellings; ``None`` or ``''``
    stands for the zero initial and for "no medial". Illegal or unknown
    triples give ``Combination(False, None)``.
    """
    resolved = resolve_triple(initial, final, medial)

    if resolved is None:
        return INVALID

    initial, medial, final = resolved

    if not _is_registered(initial, final, medial):
        return INVALID

    return Combination(True, spell(initial, final, medial))


def is_valid_combination(initial, final, medial=None) -> bool:
    return validate(initial, final, medial).ok


def can_have_medial(initial) -> bool:
    initial = _coerce(MandarinInitial, initial)

    if initial is None:
        return False

    for medial_rules in VALID_TRIPLES.values():
        for valid_initials in medial_rules.values():
            if initial in valid_initials:
                return True

    return False


def iter_valid_syllables() -> Iterator[Tuple[MandarinInitial, MandarinMedial, MandarinFinal, str]]:
    for initial in INITIALS + (MandarinInitial._,):
        for final in MandarinFinal:
            if final in VALID_COMBINATIONS[initial]:
                yield initial, MandarinMedial._, final, spell(initial, final)

        for medial in MEDIALS:
            for final, valid_initials in VALID_TRIPLES[medial].items():
                if initial in valid_initials:
                    yield initial, medial, final, spell(initial, final, medial)
