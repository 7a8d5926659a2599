"""
Run configuration for the ladder CLI.

Example ladders.yaml:
  lexicon: english.txt
  words: [cat, cot, cog, dog]
  verify: true
  queries:
    - from: work
      to: play
    - from: awake
      to: sleep
"""

from pathlib import Path
from typing import List, Optional, Set

import yaml
from pydantic import BaseModel, ConfigDict, Field

from .ladder.models import LadderResult, ValidationResult
from .lexicon import read_lexicon


class WordLoader(yaml.SafeLoader):
    """SafeLoader that keeps yes/no/on/off as plain strings."""


# Words like "no" and "on" must not become booleans; pydantic still parses
# "true"/"false" strings for bool fields
WordLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp) for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:bool"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class LadderQuery(BaseModel):
    """A single source/target pair to search."""
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(..., alias="from")
    target: str = Field(..., alias="to")


class LadderConfig(BaseModel):
    """Configuration for a ladder run."""
    lexicon: Optional[str] = None
    words: List[str] = Field(default_factory=list)  # Merged into the loaded lexicon
    queries: List[LadderQuery] = Field(default_factory=list)
    verify: bool = False


class RunResult(BaseModel):
    """Result of a complete CLI run."""
    config: LadderConfig
    lexicon_size: int = 0
    results: List[LadderResult] = Field(default_factory=list)
    validations: List[ValidationResult] = Field(default_factory=list)  # Parallel to results when verifying
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0


def load_config(config_path: str) -> LadderConfig:
    """Load ladder configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.load(f, Loader=WordLoader) or {}

    return LadderConfig(**data)


def build_lexicon(config: LadderConfig) -> Set[str]:
    """Load the configured word list and add any inline words."""
    lexicon = read_lexicon(config.lexicon) if config.lexicon else set()
    lexicon.update(word.strip() for word in config.words if word.strip())
    return lexicon
