"""Type definitions of parsed blame output."""

from dataclasses import dataclass


# Length of a SHA-1 commit hash as shown in porcelain header lines
COMMIT_HASH_LENGTH = 40

# Value of num_lines when a header line has no span length
MISSING_NUM_LINES = '-1'


@dataclass
class CommitRecord:
    """Metadata about one commit referenced by the blame output.

    All values are stored verbatim as found in the porcelain text.
    """

    author: str = ''
    author_mail: str = ''        # usually includes the angle brackets
    author_time: str = ''        # seconds since the epoch
    author_tz: str = ''          # e.g. +0200
    committer: str = ''
    committer_mail: str = ''
    committer_time: str = ''
    committer_tz: str = ''
    summary: str = ''
    previous_hash: str = ''      # previous commit hash and file name
    filename: str = ''


@dataclass
class LineAttribution:
    """Attribution of one line of the final file to a commit."""

    hash: str                    # commit hash; key into the CommitTable
    original_line: str           # line number in the commit's version of the file
    final_line: str              # line number in the current version of the file
    num_lines: str = MISSING_NUM_LINES  # number of lines in this group
    code: str = ''               # line contents


CommitTable = dict[str, CommitRecord]
LineTable = dict[str, LineAttribution]
ParsedBlame = tuple[CommitTable, LineTable]
