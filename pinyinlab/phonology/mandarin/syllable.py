from enum import Enum


class MandarinInitial(Enum):
    B = 'b'
    P = 'p'
    M = 'm'
    F = 'f'
    D = 'd'
    T = 't'
    N = 'n'
    L = 'l'
    G = 'g'
    K = 'k'
    H = 'h'
    J = 'j'
    Q = 'q'
    X = 'x'
    ZH = 'zh'
    CH = 'ch'
    SH = 'sh'
    R = 'r'
    Z = 'z'
    C = 'c'
    S = 's'
    # spelling markers for the zero initial
    Y = 'y'
    W = 'w'
    _ = ''

    @property
    def is_zero_spelling(self) -> bool:
        return self in (MandarinInitial.Y, MandarinInitial.W)


class MandarinMedial(Enum):
    I = 'i'
    U = 'u'
    V = 'ü'
    _ = ''


class MandarinFinal(Enum):
    A = 'a'
    O = 'o'
    E = 'e'
    I = 'i'
    U = 'u'
    V = 'ü'
    AI = 'ai'
    EI = 'ei'
    UI = 'ui'
    AO = 'ao'
    OU = 'ou'
    IU = 'iu'
    IE = 'ie'
    VE = 'üe'
    ER = 'er'
    AN = 'an'
    EN = 'en'
    IN = 'in'
    UN = 'un'
    VN = 'ün'
    ANG = 'ang'
    ENG = 'eng'
    ING = 'ing'
    ONG = 'ong'

    @property
    def is_simple(self) -> bool:
        return len(self.value) == 1


class MandarinTone(Enum):
    _0 = 0
    _1 = 1
    _2 = 2
    _3 = 3
    _4 = 4


class MandarinSyllable:
    """A decomposed syllable.

    ``initial`` is the phonemic initial, so ``ying`` and ``wu`` carry
    ``MandarinInitial._``. The ``y``/``w`` letter that spelled the zero initial
    is kept in ``spelling_initial``; ``written_initial`` gives back whichever
    of the two a learner would pick.
    """

    __slots__ = ('initial', 'medial', 'final', 'tone', 'spelling_initial')

    initial: MandarinInitial
    medial: MandarinMedial
    final: MandarinFinal
    tone: MandarinTone
    spelling_initial: MandarinInitial

    def __init__(self, initial: MandarinInitial, medial: MandarinMedial, final: MandarinFinal, tone: MandarinTone = MandarinTone._0, spelling_initial: MandarinInitial = MandarinInitial._):
        object.__setattr__(self, 'initial', initial)
        object.__setattr__(self, 'medial', medial)
        object.__setattr__(self, 'final', final)
        object.__setattr__(self, 'tone', tone)
        object.__setattr__(self, 'spelling_initial', spelling_initial)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def _key(self):
        return (self.initial, self.medial, self.final, self.tone, self.spelling_initial)

    def __eq__(self, other):
        if not isinstance(other, MandarinSyllable):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    @property
    def written_initial(self) -> MandarinInitial:
        if self.spelling_initial is not MandarinInitial._:
            return self.spelling_initial
        return self.initial

    @property
    def base(self) -> str:
        from .combination import validate

        combination = validate(self.written_initial, self.final, self.medial)

        if not combination.ok:
            raise ValueError('ill-formed syllable')

        return combination.syllable

    @property
    def marked(self) -> str:
        from .tone import render_tone

        return render_tone(self.base, self.tone.value)

    @property
    def numbered(self) -> str:
        return f'{self.base}{self.tone.value or 5}'

    def __repr__(self):
        return f'MandarinSyllable({repr(self.initial)}, {repr(self.medial)}, {repr(self.final)}, {repr(self.tone)}, {repr(self.spelling_initial)})'

    def __str__(self):
        return f'({self.written_initial.value}, {self.medial.value}, {self.final.value}, {self.tone.value})'
