"""Debug functions to summarize parsed blame output"""

import collections
import io
from collections.abc import Mapping
from typing import List

from blameparse import config
from blameparse.blamedef import CommitRecord, LineAttribution


def show_totals(commits: Mapping[str, CommitRecord], lines: Mapping[str, LineAttribution],
                details: bool = False):
    print(''.join(summarize_totals(commits, lines, details)), end='')


def summarize_totals(commits: Mapping[str, CommitRecord], lines: Mapping[str, LineAttribution],
                     details: bool = False) -> List[str]:
    """Count the lines attributed to each author and, optionally, to each commit.

    Authors and commits with the most lines are listed first.
    """
    f = io.StringIO()
    print('COMMITS:', len(commits), file=f)
    print('LINES:', len(lines), file=f)
    authors = collections.Counter(
        commits[line.hash].author for line in lines.values() if line.hash in commits)
    for author, count in sorted(authors.items(), key=lambda x: (-x[1], x[0])):
        print(f'  {author or "(unknown)"}: {count}', file=f)
    if details:
        hashlen = config.get('summary_short_hash_length')
        percommit = collections.Counter(line.hash for line in lines.values())
        for commit_hash, count in sorted(percommit.items(), key=lambda x: (-x[1], x[0])):
            summary = commits[commit_hash].summary if commit_hash in commits else ''
            print(f'  {commit_hash[:hashlen]} {count} {summary}'.rstrip(), file=f)
    f.seek(0)
    return f.readlines()
