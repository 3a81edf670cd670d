import pandas as pd

import argparse
import logging
import sys

import pinyinlab.config
import pinyinlab.quiz
import pinyinlab.util
import pinyinlab.util.table

from typing import Any


def quiz_pool_to_table(quiz_pool: pinyinlab.quiz.QuizPool) -> pd.DataFrame:
    records = []

    for item in quiz_pool.items:
        syllable = item.syllable

        records.append((item.character, ord(item.character), item.pinyin, item.tone, syllable.marked, syllable.written_initial.value, syllable.medial.value, syllable.final.value))

    return pd.DataFrame.from_records(records, columns=('character', 'codepoint', 'pinyin', 'tone', 'marked', 'initial', 'medial', 'final'))


def main(args: Any) -> None:
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.config is not None:
        quiz_config = pinyinlab.config.load_quiz_config(args.config)
    else:
        quiz_config = pinyinlab.config.default_quiz_config()

    if args.input is not None:
        quiz_config['input'] = args.input
    if args.output_format is not None:
        quiz_config['output_format'] = args.output_format
    if args.all:
        quiz_config['unique'] = False

    text = pinyinlab.util.read_text(quiz_config['input'])

    quiz_pool = pinyinlab.quiz.parse_text_to_quiz_items(text, unique=quiz_config['unique'], progress=args.progress)

    for character, reading in quiz_pool.skipped:
        print(f'skipped: U+{ord(character):04X}\t{character}\t{reading}', file=sys.stderr)

    print(f'kept {len(quiz_pool.items)} items, coverage {quiz_pool.coverage:.1%}', file=sys.stderr)

    output_format = quiz_config['output_format']
    output_type = argparse.FileType('wb') if output_format in pinyinlab.util.table.BINARY_OUTPUT_FORMATS else argparse.FileType('w', encoding='utf-8')

    with output_type(args.output) as output_file:
        pinyinlab.util.table.write_table(quiz_pool_to_table(quiz_pool), output_file, output_format)

    return


def get_args_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Build pinyin quiz items from Chinese text.')

    parser.add_argument('-c', '--config', metavar='CONFIG', default=None, help='quiz config file path')
    parser.add_argument('-t', '--output-format', choices=pinyinlab.config.OUTPUT_FORMATS, default=None, help='output format')
    parser.add_argument('-o', '--output', metavar='OUTPUT', default='-', help='output file path')
    parser.add_argument('-a', '--all', action='store_true', help='keep repeated characters')
    parser.add_argument('-p', '--progress', action='store_true', help='show progress')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    parser.add_argument('input', metavar='INPUT', default=None, nargs='?', help='input text file path')

    return parser


if __name__ == '__main__':
    args = get_args_parser().parse_args()
    main(args)
