from types import MappingProxyType
from typing import FrozenSet, Mapping

from .syllable import MandarinFinal, MandarinInitial, MandarinMedial


# the 23 initials offered to learners, in teaching order
INITIALS = (
    MandarinInitial.B, MandarinInitial.P, MandarinInitial.M, MandarinInitial.F,
    MandarinInitial.D, MandarinInitial.T, MandarinInitial.N, MandarinInitial.L,
    MandarinInitial.G, MandarinInitial.K, MandarinInitial.H,
    MandarinInitial.J, MandarinInitial.Q, MandarinInitial.X,
    MandarinInitial.ZH, MandarinInitial.CH, MandarinInitial.SH, MandarinInitial.R,
    MandarinInitial.Z, MandarinInitial.C, MandarinInitial.S,
    MandarinInitial.Y, MandarinInitial.W,
)

# longest tokens first, so that 'zh' is tried before 'z'
PHONEMIC_INITIALS = tuple(sorted(
    (initial for initial in INITIALS if not initial.is_zero_spelling),
    key=lambda initial: -len(initial.value),
))

ZERO_SPELLINGS = (MandarinInitial.Y, MandarinInitial.W)

FINALS = tuple(MandarinFinal)

SIMPLE_FINALS = tuple(final for final in FINALS if final.is_simple)

COMPOUND_FINALS = tuple(final for final in FINALS if not final.is_simple)

MEDIALS = (MandarinMedial.I, MandarinMedial.U, MandarinMedial.V)

# ü is written u after these
UMLAUT_ELIDING_INITIALS = frozenset((MandarinInitial.J, MandarinInitial.Q, MandarinInitial.X, MandarinInitial.Y))

NUCLEUS_VOWELS = ('a', 'o', 'e', 'i', 'u', 'ü')

TONE_MARKS = MappingProxyType({
    'a': ('ā', 'á', 'ǎ', 'à'),
    'o': ('ō', 'ó', 'ǒ', 'ò'),
    'e': ('ē', 'é', 'ě', 'è'),
    'i': ('ī', 'í', 'ǐ', 'ì'),
    'u': ('ū', 'ú', 'ǔ', 'ù'),
    'ü': ('ǖ', 'ǘ', 'ǚ', 'ǜ'),
})

WHOLE_SYLLABLES = (
    'zhi', 'chi', 'shi', 'ri', 'zi', 'ci', 'si',
    'yi', 'wu', 'yu', 'ye', 'yue', 'yuan', 'yin', 'yun', 'ying',
)


def _finals(spellings: str) -> FrozenSet[MandarinFinal]:
    return frozenset(MandarinFinal(spelling) for spelling in spellings.split())


def _initials(spellings: str) -> FrozenSet[MandarinInitial]:
    return frozenset(MandarinInitial(spelling) for spelling in spellings.split())


_J_Q_X_FINALS = _finals('i ü iu ie üe in ün ing')
_SIBILANT_FINALS = _finals('a e i u ai ei ui ao ou an en un ang eng ong')

VALID_COMBINATIONS: Mapping[MandarinInitial, FrozenSet[MandarinFinal]] = MappingProxyType({
    MandarinInitial.B: _finals('a o i u ai ei ie ao an en in ang eng ing'),
    MandarinInitial.P: _finals('a o i u ai ei ie ao ou an en in ang eng ing'),
    MandarinInitial.M: _finals('a o e i u ai ei ie ao ou iu an en in ang eng ing'),
    MandarinInitial.F: _finals('a o u ei ou an en ang eng'),
    MandarinInitial.D: _finals('a e i u ai ei ui ao ou iu ie an en un ang eng ing ong'),
    MandarinInitial.T: _finals('a e i u ai ei ui ao ou ie an un ang eng ing ong'),
    MandarinInitial.N: _finals('a e i u ü ai ei ao ou iu ie üe an en in un ang eng ing ong'),
    MandarinInitial.L: _finals('a e i u ü ai ei ao ou iu ie üe an in un ang eng ing ong'),
    MandarinInitial.G: _finals('a e u ai ei ui ao ou an en un ang eng ong'),
    MandarinInitial.K: _finals('a e u ai ei ui ao ou an en un ang eng ong'),
    MandarinInitial.H: _finals('a e u ai ei ui ao ou an en un ang eng ong'),
    MandarinInitial.J: _J_Q_X_FINALS,
    MandarinInitial.Q: _J_Q_X_FINALS,
    MandarinInitial.X: _J_Q_X_FINALS,
    MandarinInitial.ZH: _SIBILANT_FINALS,
    MandarinInitial.CH: _SIBILANT_FINALS,
    MandarinInitial.SH: _finals('a e i u ai ei ui ao ou an en un ang eng'),
    MandarinInitial.R: _finals('e i u ui ao ou an en un ang eng ong'),
    MandarinInitial.Z: _SIBILANT_FINALS,
    MandarinInitial.C: _SIBILANT_FINALS,
    MandarinInitial.S: _SIBILANT_FINALS,
    MandarinInitial.Y: _finals('a o e i ü ao ou üe an in ün ang ing ong'),
    MandarinInitial.W: _finals('a o u ai ei an en ang eng'),
    MandarinInitial._: _finals('a o e ai ei ao ou er an en ang eng'),
})

VALID_TRIPLES: Mapping[MandarinMedial, Mapping[MandarinFinal, FrozenSet[MandarinInitial]]] = MappingProxyType({
    MandarinMedial.I: MappingProxyType({
        MandarinFinal.A: _initials('d l n j q x'),
        MandarinFinal.AO: _initials('b p m d t l n j q x'),
        MandarinFinal.AN: _initials('b p m d t l n j q x'),
        MandarinFinal.ANG: _initials('l n j q x'),
        MandarinFinal.ONG: _initials('j q x'),
    }),
    MandarinMedial.U: MappingProxyType({
        MandarinFinal.A: _initials('g k h zh ch sh'),
        MandarinFinal.O: _initials('g k h d t l n zh ch sh r z c s'),
        MandarinFinal.AI: _initials('g k h zh ch sh'),
        MandarinFinal.AN: _initials('g k h d t l n zh ch sh r z c s'),
        MandarinFinal.ANG: _initials('g k h zh ch sh'),
    }),
    MandarinMedial.V: MappingProxyType({
        MandarinFinal.AN: _initials('j q x y'),
    }),
})
