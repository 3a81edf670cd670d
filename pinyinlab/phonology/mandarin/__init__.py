from .syllable import MandarinInitial, MandarinMedial, MandarinFinal, MandarinTone, MandarinSyllable
from .tables import INITIALS, PHONEMIC_INITIALS, FINALS, SIMPLE_FINALS, COMPOUND_FINALS, MEDIALS, TONE_MARKS, UMLAUT_ELIDING_INITIALS, VALID_COMBINATIONS, VALID_TRIPLES, WHOLE_SYLLABLES
from .combination import Combination, validate, resolve_triple, is_valid_combination, can_have_medial, iter_valid_syllables
from .tone import MissingNucleusError, nucleus_vowel, render_tone, tone_variants, strip_tone
from .pinyin import normalize_pinyin, decompose, parse_pinyin_syllable
