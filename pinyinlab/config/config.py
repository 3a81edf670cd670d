import json
import os

from ..util import abspath


OUTPUT_FORMATS = ('csv', 'json', 'yaml', 'pickle')

_quiz_config_defaults = {
    'input': '-',
    'unique': True,
    'output_format': 'csv',
}


def load_quiz_config(quiz_config_path: str) -> dict:
    quiz_config_basepath = os.path.dirname(quiz_config_path)

    with open(quiz_config_path, 'r', encoding='utf-8') as fd:
        quiz_config = json.load(fd)

    unknown_keys = set(quiz_config) - set(_quiz_config_defaults)

    if unknown_keys:
        raise ValueError(f'unknown quiz config keys: {", ".join(sorted(unknown_keys))}')

    quiz_config = {**_quiz_config_defaults, **quiz_config}

    if quiz_config['input'] != '-':
        quiz_config['input'] = abspath(quiz_config['input'], quiz_config_basepath)

    if quiz_config['output_format'] not in OUTPUT_FORMATS:
        raise ValueError('invalid output format')

    quiz_config['unique'] = bool(quiz_config['unique'])

    return quiz_config


def default_quiz_config() -> dict:
    return dict(_quiz_config_defaults)
