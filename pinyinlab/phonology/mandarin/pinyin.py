import unicodedata
from typing import Any, Optional, Tuple

from .combination import is_valid_combination
from .syllable import MandarinFinal, MandarinInitial, MandarinMedial, MandarinSyllable
from .tables import MEDIALS, PHONEMIC_INITIALS, UMLAUT_ELIDING_INITIALS, ZERO_SPELLINGS
from .tone import strip_tone

pinyin_initial_dict = {
    # longest keys first
    initial.value: initial for initial in PHONEMIC_INITIALS
}

pinyin_zero_spelling_dict = {
    initial.value: initial for initial in ZERO_SPELLINGS
}

pinyin_medial_dict = {
    medial.value: medial for medial in MEDIALS
}

pinyin_final_dict = {
    final.value: final for final in MandarinFinal
}


def normalize_pinyin(pinyin_syllable: str) -> str:
    pinyin_syllable = unicodedata.normalize('NFKC', pinyin_syllable).strip().lower()

    return pinyin_syllable.replace('u:', 'ü').replace('v', 'ü')


def _parse_inner(input: str, token_dict: dict) -> Tuple[Any, str]:
    for key, value in token_dict.items():
        if input.startswith(key):
            return value, input[len(key):]

    return None, input


def _parse_rest(initial: MandarinInitial, pinyin_rest: str) -> Optional[Tuple[MandarinMedial, MandarinFinal]]:
    candidates = [pinyin_rest]

    if pinyin_rest.startswith('u'):
        umlaut_rest = 'ü' + pinyin_rest[1:]

        if initial in UMLAUT_ELIDING_INITIALS:
            candidates = [umlaut_rest]
        else:
            # lue, nue: only when the plain u reading fails
            candidates.append(umlaut_rest)

    for candidate in candidates:
        for key, medial in pinyin_medial_dict.items():
            if not candidate.startswith(key):
                continue

            final = pinyin_final_dict.get(candidate[len(key):])

            if final is not None and is_valid_combination(initial, final, medial):
                return medial, final

        final = pinyin_final_dict.get(candidate)

        if final is not None and is_valid_combination(initial, final):
            return MandarinMedial._, final

    return None


def decompose(pinyin_syllable: str, skip_normalization: bool = False) -> Optional[MandarinSyllable]:
    """Split a pinyin syllable into initial, medial, final and tone.

    Accepts tone marks (``xué``), tone numbers (``xue2``) and ``v`` for ``ü``.
    Returns ``None`` when the text is not a registered syllable.
    """
    if not skip_normalization:
        pinyin_syllable = normalize_pinyin(pinyin_syllable)

    pinyin_syllable, tone = strip_tone(pinyin_syllable)

    initial, pinyin_rest = _parse_inner(pinyin_syllable, pinyin_initial_dict)

    if initial is not None:
        parsed = _parse_rest(initial, pinyin_rest)

        if parsed is None:
            return None

        medial, final = parsed

        return MandarinSyllable(initial, medial, final, tone)

    spelling_initial, pinyin_rest = _parse_inner(pinyin_syllable, pinyin_zero_spelling_dict)

    if spelling_initial is not None:
        parsed = _parse_rest(spelling_initial, pinyin_rest)

        if parsed is not None:
            medial, final = parsed

            return MandarinSyllable(MandarinInitial._, medial, final, tone, spelling_initial)

    # bare zero-initial syllables, and the unstripped y/w text as a last resort
    parsed = _parse_rest(MandarinInitial._, pinyin_syllable)

    if parsed is None:
        return None

    medial, final = parsed

    return MandarinSyllable(MandarinInitial._, medial, final, tone)


def parse_pinyin_syllable(pinyin_syllable: str, skip_normalization: bool = False) -> MandarinSyllable:
    syllable = decompose(pinyin_syllable, skip_normalization=skip_normalization)

    if syllable is None:
        raise ValueError('invalid pinyin syllable')

    return syllable
