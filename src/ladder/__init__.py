"""Shortest word ladder generation."""

from .generate import generate, solve
from .neighbors import find_neighbors, is_adjacent
from .models import Ladder, LadderResult, ValidationError, ValidationResult
from .verify import verify_ladders, validate_ladder, validate_order
from .formatting import format_ladder, format_ladders

__all__ = [
    # Generation
    "generate",
    "solve",
    # Neighbor expansion
    "find_neighbors",
    "is_adjacent",
    # Models
    "Ladder",
    "LadderResult",
    "ValidationError",
    "ValidationResult",
    # Verification
    "verify_ladders",
    "validate_ladder",
    "validate_order",
    # Formatting
    "format_ladder",
    "format_ladders",
]
