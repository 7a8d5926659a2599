"""Ladder rendering utilities."""

from typing import List

from .models import Ladder


def format_ladder(ladder: Ladder) -> str:
    """Render a ladder as a brace-delimited, comma-separated sequence."""
    return "{" + ", ".join(ladder) + "}"


def format_ladders(ladders: List[Ladder]) -> str:
    """Render a list of ladders, one per line."""
    if not ladders:
        return ""

    return "\n".join(format_ladder(ladder) for ladder in ladders)
