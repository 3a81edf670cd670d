import json
import os

import pytest

from pinyinlab.config import default_quiz_config, load_quiz_config
from pinyinlab.util import abspath, read_text


def _write_config(directory, payload) -> str:
    path = directory / 'quiz.json'
    path.write_text(json.dumps(payload), encoding='utf-8')
    return str(path)


def test_input_is_resolved_against_the_config_directory(tmp_path) -> None:
    config_path = _write_config(tmp_path, {'input': 'texts/lesson1.txt', 'unique': False})

    quiz_config = load_quiz_config(config_path)

    assert quiz_config['input'] == os.path.join(str(tmp_path), 'texts', 'lesson1.txt')
    assert quiz_config['unique'] is False
    assert quiz_config['output_format'] == 'csv'


def test_defaults_apply_to_missing_keys(tmp_path) -> None:
    quiz_config = load_quiz_config(_write_config(tmp_path, {}))

    assert quiz_config == default_quiz_config()


def test_invalid_output_format(tmp_path) -> None:
    with pytest.raises(ValueError):
        load_quiz_config(_write_config(tmp_path, {'output_format': 'xml'}))


def test_unknown_keys_are_rejected(tmp_path) -> None:
    with pytest.raises(ValueError, match='colour'):
        load_quiz_config(_write_config(tmp_path, {'colour': 'red'}))


def test_abspath(tmp_path) -> None:
    assert abspath('/a/b/../c') == os.path.normpath('/a/c')
    assert abspath('x.txt', str(tmp_path)) == os.path.join(str(tmp_path), 'x.txt')


def test_read_text(tmp_path) -> None:
    (tmp_path / 'lesson.txt').write_text('你好', encoding='utf-8')

    assert read_text('lesson.txt', str(tmp_path)) == '你好'
