"""
Ladder verification module for checking generated word ladders.

Validates:
1. Endpoints (each ladder starts at the source and ends at the target)
2. Steps (consecutive words differ by exactly one letter, no word repeats)
3. Vocabulary (every word is legal, when a lexicon is supplied)
4. The ladder list (equal lengths, no duplicates, ascending order)
"""

from typing import Container, List, Optional

from .models import Ladder, ValidationError, ValidationResult
from .neighbors import is_adjacent


def validate_ladder(
    ladder: Ladder,
    from_word: str,
    to_word: str,
    lexicon: Optional[Container[str]] = None,
    index: int = 0
) -> List[ValidationError]:
    """Validate a single ladder: endpoints, adjacency, repeats, vocabulary."""
    errors: List[ValidationError] = []

    if not ladder:
        errors.append(ValidationError(
            code="EMPTY_LADDER",
            message=f"Ladder {index} has no words",
            ladder=index
        ))
        return errors

    if ladder[0] != from_word:
        errors.append(ValidationError(
            code="WRONG_START",
            message=f"Ladder {index} starts with '{ladder[0]}', expected '{from_word}'",
            ladder=index,
            step=0,
            word=ladder[0]
        ))

    if ladder[-1] != to_word:
        errors.append(ValidationError(
            code="WRONG_END",
            message=f"Ladder {index} ends with '{ladder[-1]}', expected '{to_word}'",
            ladder=index,
            step=len(ladder) - 1,
            word=ladder[-1]
        ))

    seen = set()
    for step, word in enumerate(ladder):
        if word in seen:
            errors.append(ValidationError(
                code="REPEATED_WORD",
                message=f"Ladder {index} visits '{word}' more than once",
                ladder=index,
                step=step,
                word=word
            ))
        seen.add(word)

        if lexicon is not None and word not in (from_word, to_word) and word not in lexicon:
            errors.append(ValidationError(
                code="UNKNOWN_WORD",
                message=f"'{word}' in ladder {index} is not in the lexicon",
                ladder=index,
                step=step,
                word=word
            ))

        if step > 0 and not is_adjacent(ladder[step - 1], word):
            errors.append(ValidationError(
                code="NOT_ADJACENT",
                message=(
                    f"Illegal hop in ladder {index}: '{ladder[step - 1]}' -> '{word}' "
                    f"must change exactly one letter"
                ),
                ladder=index,
                step=step,
                word=word
            ))

    return errors


def validate_order(ladders: List[Ladder]) -> List[ValidationError]:
    """Validate the ladder list as a whole: equal lengths, no duplicates, ascending order."""
    errors: List[ValidationError] = []

    if not ladders:
        return errors

    expected = len(ladders[0])
    for i, ladder in enumerate(ladders[1:], start=1):
        if len(ladder) != expected:
            errors.append(ValidationError(
                code="LENGTH_MISMATCH",
                message=f"Ladder {i} has {len(ladder)} words, expected {expected}",
                ladder=i
            ))

        previous = ladders[i - 1]
        if ladder == previous:
            errors.append(ValidationError(
                code="DUPLICATE_LADDER",
                message=f"Ladder {i} repeats ladder {i - 1}",
                ladder=i
            ))
        elif ladder < previous:
            errors.append(ValidationError(
                code="NOT_SORTED",
                message=f"Ladder {i} sorts before ladder {i - 1}",
                ladder=i
            ))

    return errors


def verify_ladders(
    ladders: List[Ladder],
    from_word: str,
    to_word: str,
    lexicon: Optional[Container[str]] = None
) -> ValidationResult:
    """
    Main verification function: validates a list of generated ladders.

    An empty list is valid, since it is the normal "no ladder" answer.

    Returns a ValidationResult with:
    - valid: True if every ladder and the list as a whole pass all checks
    - errors: List of validation errors
    - ladder_count: Number of ladders checked
    - length: Words per ladder (taken from the first ladder)
    """
    all_errors: List[ValidationError] = []

    for i, ladder in enumerate(ladders):
        all_errors.extend(validate_ladder(ladder, from_word, to_word, lexicon, index=i))

    all_errors.extend(validate_order(ladders))

    # validate_order only sees neighbouring duplicates
    if len(set(map(tuple, ladders))) != len(ladders) and not any(
        e.code == "DUPLICATE_LADDER" for e in all_errors
    ):
        all_errors.append(ValidationError(
            code="DUPLICATE_LADDER",
            message="The same ladder appears more than once"
        ))

    return ValidationResult(
        valid=len(all_errors) == 0,
        errors=all_errors,
        ladder_count=len(ladders),
        length=len(ladders[0]) if ladders else None,
    )
