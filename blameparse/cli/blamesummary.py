"""Summarize the output of git blame --porcelain
"""

import argparse
import logging
import sys

from blameparse import argparsing
from blameparse import blameparser
from blameparse import config
from blameparse import log
from blameparse import summarize


def read_blame(fn: str) -> str:
    "Returns the entire contents of the blame file"
    if fn == argparsing.STDIN_NAME:
        return sys.stdin.read()
    with open(fn, encoding=config.get('blame_encoding')) as f:
        return f.read()


def summarize_file(fn: str, details: bool = False) -> bool:
    """Parse a file of porcelain blame output and show a summary of it.

    Returns: False if the file could not be read or parsed
    """
    try:
        text = read_blame(fn)
    except (OSError, UnicodeDecodeError):
        logging.exception('Could not read blame output from %s', fn)
        return False

    parser = blameparser.BlameParser(hash_length=config.get('commit_hash_length'))
    if not parser.parse(text):
        logging.error('Could not parse blame output from %s', fn)
        return False
    commits = parser.get_commit_table()
    lines = parser.get_line_table()
    logging.info('%d commits found for %d lines', len(commits), len(lines))
    summarize.show_totals(commits, lines, details)
    return True


def parse_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Summarize the output of git blame --porcelain')
    argparsing.arguments_logging(parser)
    argparsing.arguments_config(parser)
    parser.add_argument(
        '--details',
        action='store_true',
        help='Also show the number of lines attributed to each commit')
    parser.add_argument(
        'blamefile',
        nargs='?',
        default=argparsing.STDIN_NAME,
        type=argparsing.ExpandUserFileName(),
        help='File holding the blame output (default: stdin)')
    return parser.parse_args(args=args)


def main():
    args = parse_args()
    log.setup(args)
    if not summarize_file(args.blamefile, args.details):
        sys.exit(1)


if __name__ == '__main__':
    main()
