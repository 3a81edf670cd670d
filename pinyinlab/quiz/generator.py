import pypinyin
import tqdm

import logging
import re

from ..phonology import mandarin

from typing import List, NamedTuple, Optional, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)

# CJK Unified Ideographs, basic block
HAN_CHARACTER_PATTERN = re.compile('[\u4e00-\u9fa5]')

NEUTRAL_TONE = 5


class PinyinConverter(Protocol):
    def convert(self, character: str) -> Tuple[str, int]:
        """Return the toneless reading of ``character`` and its tone, 1-5."""
        ...


class PypinyinConverter:
    """Character to pinyin conversion backed by pypinyin.

    Polyphonic characters get pypinyin's default reading.
    """

    def convert(self, character: str) -> Tuple[str, int]:
        reading = pypinyin.pinyin(character, style=pypinyin.Style.TONE3, neutral_tone_with_five=True, v_to_u=True)[0][0]

        if reading[-1:].isdigit():
            return reading[:-1], int(reading[-1])

        return reading, NEUTRAL_TONE


def _pick_spelling(pick) -> Optional[str]:
    if isinstance(pick, (mandarin.MandarinInitial, mandarin.MandarinMedial, mandarin.MandarinFinal)):
        return pick.value

    if pick is None:
        return ''

    if not isinstance(pick, str):
        return None

    return pick.lower().replace('u:', 'ü').replace('v', 'ü')


class QuizItem(NamedTuple):
    character: str
    pinyin: str
    tone: int
    syllable: mandarin.MandarinSyllable

    def check_answer(self, initial, medial, final) -> bool:
        """Compare a learner's picks with the answer.

        After j, q, x and y the written form shows ``u`` for ``ü``, so a pick
        copying that spelling (``j + u`` for ``ju``, ``x + ue`` for ``xue``)
        is accepted as well.
        """
        picks = tuple(_pick_spelling(pick) for pick in (initial, medial, final))

        return picks in self.accepted_spellings()

    def accepted_spellings(self) -> Tuple[Tuple[str, str, str], ...]:
        written_initial = self.syllable.written_initial
        medial = self.syllable.medial.value
        final = self.syllable.final.value

        accepted = ((written_initial.value, medial, final),)

        if written_initial in mandarin.UMLAUT_ELIDING_INITIALS:
            if medial.startswith('ü'):
                accepted += ((written_initial.value, 'u' + medial[1:], final),)
            elif final.startswith('ü'):
                accepted += ((written_initial.value, medial, 'u' + final[1:]),)

        return accepted


class QuizPool(NamedTuple):
    items: Sequence[QuizItem]
    skipped: Sequence[Tuple[str, str]]

    @property
    def coverage(self) -> float:
        total = len(self.items) + len(self.skipped)

        if total == 0:
            return 1.0

        return len(self.items) / total


def extract_characters(text: str, unique: bool = True) -> List[str]:
    characters = HAN_CHARACTER_PATTERN.findall(text)

    if unique:
        characters = list(dict.fromkeys(characters))

    return characters


def parse_text_to_quiz_items(text: str, converter: Optional[PinyinConverter] = None, unique: bool = True, progress: bool = False) -> QuizPool:
    if converter is None:
        converter = PypinyinConverter()

    items = []
    skipped = []

    for character in tqdm.tqdm(extract_characters(text, unique=unique), desc='Converting', disable=not progress):
        reading, tone = converter.convert(character)

        syllable = mandarin.decompose(f'{reading}{tone}')

        if syllable is None:
            logger.warning(f'skipped {character} (U+{ord(character):04X}): cannot decompose {reading!r}')
            skipped.append((character, reading))
            continue

        items.append(QuizItem(character, syllable.base, tone, syllable))

    if skipped:
        logger.info(f'quiz pool kept {len(items)} of {len(items) + len(skipped)} characters')

    return QuizPool(tuple(items), tuple(skipped))
