"""Pair (将) candidate enumeration shared by win detection and shanten."""

from typing import Callable, Iterator, List, Optional, Tuple

# (pair index34 or None for "no pair chosen", counts with the pair removed)
PairCandidate = Tuple[Optional[int], Tuple[int, ...]]


def iter_pair_candidates(tiles_34: List[int],
                         include_unpaired: bool = False) -> Iterator[PairCandidate]:
    """Yield every way of setting aside the hand's single pair.

    Every kind with at least two copies is a candidate; with
    ``include_unpaired`` the untouched counts are yielded last as ``None``.
    """
    for head in range(34):
        if tiles_34[head] >= 2:
            remaining = list(tiles_34)
            remaining[head] -= 2
            yield head, tuple(remaining)
    if include_unpaired:
        yield None, tuple(tiles_34)


def best_over_pair_candidates(tiles_34: List[int],
                              evaluate: Callable[[Optional[int], Tuple[int, ...]], int],
                              include_unpaired: bool = False,
                              floor: Optional[int] = None,
                              default: int = 99) -> int:
    """Minimum of ``evaluate(head, remaining)`` over all pair candidates.

    Stops early once ``floor`` is reached. Returns ``default`` when there is
    no candidate at all.
    """
    best = default
    for head, remaining in iter_pair_candidates(tiles_34, include_unpaired):
        best = min(best, evaluate(head, remaining))
        if floor is not None and best <= floor:
            break
    return best
