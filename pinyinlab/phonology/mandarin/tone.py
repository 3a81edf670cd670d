import unicodedata
from typing import Optional, Tuple

from .syllable import MandarinTone
from .tables import NUCLEUS_VOWELS, TONE_MARKS


class MissingNucleusError(AssertionError):
    """Raised when a syllable has no vowel to carry the tone mark.

    Every registered final has a nucleus, so this points at a table
    defect rather than bad input.
    """


pinyin_tone_dict = {
    marked: (plain, tone_index + 1)
    for plain in NUCLEUS_VOWELS
    for tone_index, marked in enumerate(TONE_MARKS[plain])
}


def nucleus_vowel(pinyin_syllable: str) -> Optional[str]:
    for vowel in ('a', 'o', 'e'):
        if vowel in pinyin_syllable:
            return vowel

    if 'i' in pinyin_syllable and 'u' in pinyin_syllable:
        # iu / ui: the later vowel carries the mark
        return 'u' if pinyin_syllable.index('i') < pinyin_syllable.index('u') else 'i'

    for vowel in ('i', 'u', 'ü'):
        if vowel in pinyin_syllable:
            return vowel

    return None


def render_tone(pinyin_syllable: str, tone: int) -> str:
    if isinstance(tone, MandarinTone):
        tone = tone.value

    if not isinstance(tone, int) or tone not in range(6):
        raise ValueError(f'invalid tone: {tone}')

    if tone in (0, 5):
        return pinyin_syllable

    vowel = nucleus_vowel(pinyin_syllable)

    if vowel is None:
        raise MissingNucleusError(f'no nucleus vowel in {pinyin_syllable!r}')

    return pinyin_syllable.replace(vowel, TONE_MARKS[vowel][tone - 1], 1)


def tone_variants(pinyin_syllable: str) -> Tuple[str, str, str, str]:
    return tuple(render_tone(pinyin_syllable, tone) for tone in range(1, 5))


def strip_tone(pinyin_syllable: str) -> Tuple[str, MandarinTone]:
    """Split marked or numbered pinyin into its base spelling and tone.

    >>> strip_tone('mǎ')
    ('ma', <MandarinTone._3: 3>)
    >>> strip_tone('hao3')
    ('hao', <MandarinTone._3: 3>)
    """
    pinyin_syllable = unicodedata.normalize('NFC', pinyin_syllable)

    for position, char in enumerate(pinyin_syllable):
        if char in pinyin_tone_dict:
            plain, tone_number = pinyin_tone_dict[char]
            return pinyin_syllable[:position] + plain + pinyin_syllable[position + 1:], MandarinTone(tone_number)

    if pinyin_syllable[-1:] in ('0', '1', '2', '3', '4', '5'):
        return pinyin_syllable[:-1], MandarinTone(int(pinyin_syllable[-1]) % 5)

    return pinyin_syllable, MandarinTone._0
