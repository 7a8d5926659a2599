"""Word list loading."""

from .loader import read_lexicon, parse_words

__all__ = ["read_lexicon", "parse_words"]
