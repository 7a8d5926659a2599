"""Data models for ladder generation and validation."""

from typing import List, Optional
from pydantic import BaseModel, Field


# Type aliases
Ladder = List[str]


class LadderResult(BaseModel):
    """Result of a single ladder search."""
    source: str
    target: str
    ladders: List[Ladder] = Field(default_factory=list)
    depth: Optional[int] = None  # Hop count, None when unreachable
    words_explored: int = 0
    layers: int = 0

    @property
    def found(self) -> bool:
        """Whether at least one ladder connects source and target."""
        return len(self.ladders) > 0


class ValidationError(BaseModel):
    """A single ladder validation error."""
    code: str
    message: str
    ladder: Optional[int] = None  # Index into the ladder list
    step: Optional[int] = None  # Index of the offending word
    word: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of ladder validation."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    ladder_count: int = 0
    length: Optional[int] = None  # Words per ladder
