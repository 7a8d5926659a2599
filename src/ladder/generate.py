"""
Shortest word ladder generation.

Runs a breadth-first search over the implicit graph whose nodes are lexicon
words and whose edges join words one substitution apart. The search advances
one whole layer at a time:

1. Every word in the current layer is expanded against the words finalized in
   earlier layers only, so several paths may pass through the same new word.
2. Newly reached words are merged into the visited set once the layer is done.
3. The search stops after the first layer that reaches the target.

Paths are stored as parent back-pointers and only rebuilt for the target.
"""

from typing import Container, Dict, List, Optional, Set, Tuple

from .models import Ladder, LadderResult
from .neighbors import find_neighbors


Parents = Dict[str, List[str]]


def _search(
    from_word: str,
    to_word: str,
    lexicon: Container[str]
) -> Tuple[Parents, bool, int]:
    """
    Expand layers until the target is reached or the frontier drains.

    Returns a tuple of (parents, found, layers expanded).
    """
    parents: Parents = {from_word: []}
    visited: Set[str] = {from_word}
    frontier: List[str] = [from_word]
    layers = 0

    if from_word == to_word:
        return parents, True, layers

    while frontier:
        layers += 1
        layer_parents: Parents = {}

        for word in frontier:
            for neighbor in find_neighbors(word, lexicon):
                if neighbor in visited:
                    continue
                layer_parents.setdefault(neighbor, []).append(word)

        # Deferred merge: words reached in this layer become forbidden only now
        visited.update(layer_parents)
        parents.update(layer_parents)

        if to_word in layer_parents:
            return parents, True, layers

        frontier = list(layer_parents)

    return parents, False, layers


def _unwind(parents: Parents, from_word: str, to_word: str) -> List[Ladder]:
    """Rebuild every source-to-target path from the parent map, iteratively."""
    ladders: List[Ladder] = []
    stack: List[Ladder] = [[to_word]]

    while stack:
        partial = stack.pop()
        head = partial[-1]
        if head == from_word:
            ladders.append(partial[::-1])
            continue
        for parent in parents[head]:
            stack.append(partial + [parent])

    ladders.sort()
    return ladders


def generate(from_word: str, to_word: str, lexicon: Container[str]) -> List[Ladder]:
    """
    Generate all shortest word ladders from `from_word` to `to_word`.

    Args:
        from_word: The source word
        to_word: The target word
        lexicon: Collection of legal intermediate and target words

    Returns:
        All shortest ladders in ascending lexicographic order. Empty if no
        ladder exists. `[[from_word]]` if both words are the same.
    """
    parents, found, _ = _search(from_word, to_word, lexicon)
    if not found:
        return []
    return _unwind(parents, from_word, to_word)


def solve(from_word: str, to_word: str, lexicon: Container[str]) -> LadderResult:
    """
    Generate ladders and report search statistics alongside them.

    Returns:
        LadderResult with ladders, depth (hop count), words explored and
        number of layers expanded
    """
    parents, found, layers = _search(from_word, to_word, lexicon)
    ladders = _unwind(parents, from_word, to_word) if found else []
    depth: Optional[int] = len(ladders[0]) - 1 if ladders else None

    return LadderResult(
        source=from_word,
        target=to_word,
        ladders=ladders,
        depth=depth,
        words_explored=len(parents),
        layers=layers,
    )
