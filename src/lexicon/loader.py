# Reads a plain word list (one word per line) into a lexicon set.
# A missing or unreadable source yields an empty lexicon.

from pathlib import Path
from typing import Iterable, Set


def parse_words(lines: Iterable[str]) -> Set[str]:
    '''
    Returns the distinct, whitespace-stripped, non-blank lines.
    '''
    return {line.strip() for line in lines if line.strip()}


def read_lexicon(path) -> Set[str]:
    '''
    Returns the set of words in the file at `path`.
    Returns an empty set if the file is missing or cannot be read.
    '''
    path = Path(path)
    if not path.is_file():
        return set()

    try:
        with open(path, encoding="utf-8") as f:
            return parse_words(f)
    except (OSError, UnicodeDecodeError):
        return set()
