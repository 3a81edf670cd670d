import io
import json
import pickle

import pandas as pd
import pytest
import yaml

from pinyinlab.util.table import write_table


@pytest.fixture
def table() -> pd.DataFrame:
    return pd.DataFrame.from_records([('绿', 'lü', 4), ('学', 'xue', 2)], columns=('character', 'pinyin', 'tone'))


def test_write_csv_to_an_open_file(table) -> None:
    output_file = io.StringIO()

    write_table(table, output_file, 'csv')

    assert output_file.getvalue().splitlines() == ['character,pinyin,tone', '绿,lü,4', '学,xue,2']


def test_write_json_and_yaml_to_an_open_file(table) -> None:
    json_file = io.StringIO()
    yaml_file = io.StringIO()

    write_table(table, json_file, 'json')
    write_table(table, yaml_file, 'yaml')

    expected = [{'character': '绿', 'pinyin': 'lü', 'tone': 4}, {'character': '学', 'pinyin': 'xue', 'tone': 2}]
    assert json.loads(json_file.getvalue()) == expected
    assert yaml.safe_load(yaml_file.getvalue()) == expected
    assert 'lü' in json_file.getvalue()


def test_write_pickle_to_a_binary_file(table) -> None:
    output_file = io.BytesIO()

    write_table(table, output_file, 'pickle')

    pd.testing.assert_frame_equal(pickle.loads(output_file.getvalue()), table)


def test_invalid_output_format(table) -> None:
    with pytest.raises(ValueError):
        write_table(table, io.StringIO(), 'xml')
