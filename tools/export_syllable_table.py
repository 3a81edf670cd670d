import pandas as pd

import argparse

import pinyinlab.config
import pinyinlab.util.table
from pinyinlab.phonology import mandarin

from typing import Any


def build_syllable_table() -> pd.DataFrame:
    records = []

    for initial, medial, final, syllable in mandarin.iter_valid_syllables():
        records.append((
            initial.value,
            medial.value,
            final.value,
            syllable,
            *mandarin.tone_variants(syllable),
            syllable in mandarin.WHOLE_SYLLABLES,
        ))

    return pd.DataFrame.from_records(records, columns=('initial', 'medial', 'final', 'syllable', 'tone1', 'tone2', 'tone3', 'tone4', 'whole_syllable'))


def main(args: Any) -> None:
    table = build_syllable_table()

    if args.whole_syllables:
        table = table[table['whole_syllable']].reset_index(drop=True)

    output_type = argparse.FileType('wb') if args.output_format in pinyinlab.util.table.BINARY_OUTPUT_FORMATS else argparse.FileType('w', encoding='utf-8')

    with output_type(args.output) as output_file:
        pinyinlab.util.table.write_table(table, output_file, args.output_format)

    return


def get_args_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Export every legal pinyin syllable with its tone forms.')

    parser.add_argument('-t', '--output-format', choices=pinyinlab.config.OUTPUT_FORMATS, default='csv', help='output format')
    parser.add_argument('-w', '--whole-syllables', action='store_true', help='only syllables taught as a whole')
    parser.add_argument('-o', '--output', metavar='OUTPUT', default='-', help='output file path')

    return parser


if __name__ == '__main__':
    args = get_args_parser().parse_args()
    main(args)
