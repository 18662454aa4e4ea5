"""Parses git blame porcelain output.

The input is expected to be the complete output of "git blame --porcelain" (or -p). Each group
of lines starts with a header line holding the commit hash, the line number in the original file,
the line number in the final file and (optionally) the number of lines in the group. The first
time a commit is seen, the header is followed by detail lines (author, committer, summary, etc.)
for that commit. Every group ends with a line of source code prefixed with a tab.
"""

import enum
import logging
import sys
import types
from collections.abc import Mapping
from typing import Optional

from blameparse import summarize
from blameparse.blamedef import (
    COMMIT_HASH_LENGTH, MISSING_NUM_LINES, CommitRecord, CommitTable, LineAttribution, LineTable,
    ParsedBlame)


# Detail line field name: (CommitRecord attribute, True if the rest of the line is the value)
DETAIL_FIELDS = {
    'author': ('author', True),
    'author-mail': ('author_mail', False),
    'author-time': ('author_time', False),
    'author-tz': ('author_tz', False),
    'committer': ('committer', True),
    'committer-mail': ('committer_mail', False),
    'committer-time': ('committer_time', False),
    'committer-tz': ('committer_tz', False),
    'summary': ('summary', True),
    'filename': ('filename', False),
    'previous': ('previous_hash', True),
}


class ParseState(enum.Enum):
    """What kind of line the parser expects next."""

    AWAITING_HEADER = enum.auto()    # a header line or a code line
    COLLECTING_DETAIL = enum.auto()  # detail lines about a newly-seen commit


def _store_detail(record: Optional[CommitRecord], field: str, value: str):
    """Store the value of a detail line into the commit record."""
    if record is None:
        # Unreachable while details are only collected right after a new commit is stored
        logging.warning('Ignoring %s line with no current commit', field)
        return
    attr, free_text = DETAIL_FIELDS[field]
    setattr(record, attr, value if free_text else value.split(' ', 1)[0])


def parse_blame(text: str, hash_length: int = COMMIT_HASH_LENGTH) -> Optional[ParsedBlame]:
    """Parses git blame porcelain output.

    Args:
        text: complete porcelain output
        hash_length: length of a commit hash; 64 for SHA-256 repositories

    Returns: tuple of commit table, line table
      None is returned if the text has no lines at all
    """
    lines = text.split('\n')
    if not lines:
        logging.error('No lines found in blame output')
        return None

    commits = {}    # type: CommitTable
    attribs = {}    # type: LineTable
    state = ParseState.AWAITING_HEADER
    current_hash = ''
    current_line_key = ''
    for lineno, l in enumerate(lines, 1):
        if l.startswith('\t'):
            # The first tab is added by git and isn't part of the code
            if attrib := attribs.get(current_line_key):
                attrib.code = l[1:]
            else:
                logging.warning('Line %d: ignoring code found before any header', lineno)
            state = ParseState.AWAITING_HEADER
            current_hash = ''
            continue

        field, _, value = l.partition(' ')
        if state == ParseState.COLLECTING_DETAIL and field in DETAIL_FIELDS:
            _store_detail(commits.get(current_hash), field, value)

        elif len(field) == hash_length:
            header = l.split(' ')
            if len(header) < 3:
                logging.warning('Line %d: header line is missing line numbers', lineno)
                continue
            current_hash = header[0]
            current_line_key = header[2]
            if current_hash not in commits:
                # Details about each commit are only shown the first time it appears
                logging.debug('Found commit %s', current_hash[:8])
                commits[current_hash] = CommitRecord()
                state = ParseState.COLLECTING_DETAIL
            attribs[current_line_key] = LineAttribution(
                hash=current_hash,
                original_line=header[1],
                final_line=header[2],
                num_lines=header[3] if len(header) > 3 and header[3] else MISSING_NUM_LINES)

        elif l:
            # Things like "boundary" or fields added in newer git versions
            logging.debug('Line %d: ignoring unknown line %s', lineno, field)

    logging.debug('Found %d commits for %d lines', len(commits), len(attribs))
    return commits, attribs


class BlameParser:
    """Parses git blame porcelain output into commit and line tables.

    The tables are replaced on each successful call to parse(). An instance must not be used
    by more than one thread at a time.
    """

    def __init__(self, hash_length: int = COMMIT_HASH_LENGTH):
        self.hash_length = hash_length
        self.commit_table = {}  # type: CommitTable
        self.line_table = {}    # type: LineTable

    def parse(self, text: str) -> bool:
        """Parse the complete porcelain output.

        Returns: False if the text could not be parsed at all
        """
        parsed = parse_blame(text, self.hash_length)
        if parsed is None:
            return False
        self.commit_table, self.line_table = parsed
        return True

    def get_commit_table(self) -> Mapping[str, CommitRecord]:
        "Returns a read-only view of the commits, keyed by hash"
        return types.MappingProxyType(self.commit_table)

    def get_line_table(self) -> Mapping[str, LineAttribution]:
        "Returns a read-only view of the line attributions, keyed by final line number"
        return types.MappingProxyType(self.line_table)


# Debug interface
def main():
    logging.basicConfig(level=logging.DEBUG, format='%(levelno)s %(filename)s: %(message)s',)
    parser = BlameParser()
    if not parser.parse(sys.stdin.read()):
        sys.exit(1)
    summarize.show_totals(parser.get_commit_table(), parser.get_line_table(), details=True)


if __name__ == '__main__':
    main()
