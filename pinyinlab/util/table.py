import pandas as pd
import yaml

import pickle

from typing import IO

BINARY_OUTPUT_FORMATS = ('pickle',)


def write_table(table: pd.DataFrame, output_file: IO, output_format: str) -> None:
    """Write ``table`` to an open file.

    ``output_file`` must be opened in binary mode for the formats in
    ``BINARY_OUTPUT_FORMATS`` and in text mode otherwise.
    """
    if output_format == 'csv':
        table.to_csv(output_file, index=False)
    elif output_format == 'json':
        table.to_json(output_file, orient='records', force_ascii=False, indent=2)
    elif output_format == 'yaml':
        yaml.safe_dump(table.to_dict(orient='records'), output_file, allow_unicode=True, sort_keys=False)
    elif output_format == 'pickle':
        pickle.dump(table, output_file)
    else:
        raise ValueError('invalid output format')
