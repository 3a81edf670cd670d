from .misc import abspath, read_text
