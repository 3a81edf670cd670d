import pytest

from pinyinlab.phonology import mandarin
from pinyinlab.phonology.mandarin import MandarinFinal, MandarinInitial, MandarinMedial

UMLAUT_ELIDING = {'j', 'q', 'x', 'y'}


def _expected_spelling(initial: str, final: str) -> str:
    if initial in UMLAUT_ELIDING and final.startswith('ü'):
        return initial + 'u' + final[1:]
    return initial + final


def test_every_allowed_pair_is_valid() -> None:
    for initial, finals in mandarin.VALID_COMBINATIONS.items():
        for final in finals:
            combination = mandarin.validate(initial, final)

            assert combination.ok
            assert combination.syllable == _expected_spelling(initial.value, final.value)


def test_every_pair_outside_the_table_is_invalid() -> None:
    for initial, finals in mandarin.VALID_COMBINATIONS.items():
        for final in MandarinFinal:
            if final in finals:
                continue

            assert mandarin.validate(initial, final) == (False, None)


def test_every_triple_outside_the_table_is_invalid() -> None:
    for medial in mandarin.MEDIALS:
        for final in MandarinFinal:
            for initial in mandarin.INITIALS:
                registered = initial in mandarin.VALID_TRIPLES[medial].get(final, ())

                assert mandarin.is_valid_combination(initial, final, medial) == registered


@pytest.mark.parametrize(
    'initial, final, medial, expected',
    [
        ('b', 'a', None, 'ba'),
        ('zh', 'i', None, 'zhi'),
        ('f', 'ou', None, 'fou'),
        ('j', 'ü', None, 'ju'),
        ('q', 'üe', None, 'que'),
        ('x', 'ün', None, 'xun'),
        ('y', 'ü', None, 'yu'),
        ('l', 'ü', None, 'lü'),
        ('n', 'üe', None, 'nüe'),
        ('j', 'an', 'ü', 'juan'),
        ('y', 'an', 'ü', 'yuan'),
        ('x', 'ong', 'i', 'xiong'),
        ('g', 'a', 'u', 'gua'),
        ('sh', 'ang', 'u', 'shuang'),
        ('t', 'ao', 'i', 'tiao'),
        ('', 'er', None, 'er'),
        (None, 'ai', None, 'ai'),
        ('w', 'u', None, 'wu'),
    ],
)
def test_canonical_spelling(initial, final, medial, expected) -> None:
    combination = mandarin.validate(initial, final, medial)

    assert combination.ok
    assert combination.syllable == expected


@pytest.mark.parametrize(
    'initial, final, medial',
    [
        ('f', 'i', None),
        ('j', 'a', None),
        ('j', 'u', None),
        ('b', 'ü', None),
        ('g', 'ie', None),
        ('t', 'e', 'i'),
        ('j', 'a', 'u'),
        ('b', 'ang', 'i'),
        ('', 'i', None),
        ('', 'a', 'i'),
    ],
)
def test_illegal_triples_are_negative_results(initial, final, medial) -> None:
    combination = mandarin.validate(initial, final, medial)

    assert not combination.ok
    assert combination.syllable is None


def test_unknown_tokens_are_negative_results() -> None:
    assert mandarin.validate('v', 'a') == (False, None)
    assert mandarin.validate('b', 'xyz') == (False, None)
    assert mandarin.validate('b', 'a', 'o') == (False, None)
    assert mandarin.validate(3, 'a') == (False, None)


def test_accepts_enum_members_and_v_for_umlaut() -> None:
    assert mandarin.validate(MandarinInitial.L, MandarinFinal.V).syllable == 'lü'
    assert mandarin.validate('l', 'v').syllable == 'lü'
    assert mandarin.validate('Q', 'an', MandarinMedial.V).syllable == 'quan'


def test_medial_table_is_independent_of_the_pair_table() -> None:
    # 'ia' is spelled through the i medial; 'a' alone is not allowed after j
    assert not mandarin.is_valid_combination('j', 'a')
    assert mandarin.validate('j', 'a', 'i').syllable == 'jia'


def test_can_have_medial() -> None:
    assert mandarin.can_have_medial('j')
    assert mandarin.can_have_medial('zh')
    assert mandarin.can_have_medial(MandarinInitial.Y)
    assert not mandarin.can_have_medial('f')
    assert not mandarin.can_have_medial('w')
    assert not mandarin.can_have_medial('nope')


def test_valid_syllables_are_distinct() -> None:
    rows = list(mandarin.iter_valid_syllables())
    spellings = [row[3] for row in rows]

    assert len(spellings) == len(set(spellings))
    assert set(mandarin.WHOLE_SYLLABLES) <= set(spellings)
