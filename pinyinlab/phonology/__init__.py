from . import mandarin
