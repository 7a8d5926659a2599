"""One-letter neighbor expansion over a lexicon."""

import string
from typing import Container, Set


ALPHABET = string.ascii_lowercase


def find_neighbors(word: str, lexicon: Container[str]) -> Set[str]:
    """
    Find all lexicon words that differ from `word` by exactly one letter.

    Every position is tried with every other letter a-z. `word` itself does
    not need to be in the lexicon.

    Args:
        word: The base word
        lexicon: Collection of legal words

    Returns:
        Set of adjacent legal words
    """
    neighbors: Set[str] = set()

    for i, original in enumerate(word):
        prefix, suffix = word[:i], word[i + 1:]
        for letter in ALPHABET:
            if letter == original:
                continue
            candidate = prefix + letter + suffix
            if candidate in lexicon:
                neighbors.add(candidate)

    return neighbors


def is_adjacent(first: str, second: str) -> bool:
    """Return True if the two words have equal length and differ at exactly one position."""
    if len(first) != len(second):
        return False
    return sum(1 for a, b in zip(first, second) if a != b) == 1
