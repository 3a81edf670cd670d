import os
import os.path
import sys

from typing import Optional


def abspath(path: str, wd: Optional[str] = None) -> str:
    if os.path.isabs(path):
        return os.path.normpath(path)

    if wd is None:
        wd = os.getcwd()
    elif not os.path.isabs(wd):
        wd = os.path.abspath(wd)

    return os.path.normpath(os.path.join(wd, path))


def read_text(path: str, wd: Optional[str] = None) -> str:
    if path == '-':
        return sys.stdin.read()

    with open(abspath(path, wd), 'r', encoding='utf-8') as fd:
        return fd.read()
