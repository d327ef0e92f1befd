"""Shanten (向聽) calculation for the standard 4 melds + 1 pair form.

Shanten = minimum number of tile exchanges needed to reach a ready hand.
-1 means already a complete hand.
0 means ready (tenpai, one tile away).
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from hkmahjong.core.errors import InvalidHandSizeError
from hkmahjong.core.tile import ALL_TILE_KEYS, Tile, tiles_to_34_array
from hkmahjong.rules.agari import HONOR_RANGE, SUIT_RANGES, is_winning_hand
from hkmahjong.rules.pairs import best_over_pair_candidates

# (complete melds, partial groups) found in part of a hand
Blocks = Tuple[int, int]

WORST_SHANTEN = 8


@dataclass
class ShantenResult:
    shanten: int
    improvements: List[str] = field(default_factory=list)

    @property
    def is_winning(self) -> bool:
        return self.shanten == -1

    @property
    def is_tenpai(self) -> bool:
        return self.shanten == 0


def calculate_shanten(hand: Sequence[Tile], called_melds: int = 0) -> ShantenResult:
    """Shanten and improving tile kinds for a 13- or 14-tile hand.

    ``called_melds`` exposed melds shrink the expected size by 3 each.
    """
    sizes = (13 - 3 * called_melds, 14 - 3 * called_melds)
    if not (0 <= called_melds <= 4) or len(hand) not in sizes:
        raise InvalidHandSizeError(
            f"Hand must have 13 or 14 tiles for shanten calculation "
            f"(less 3 per exposed meld), got {len(hand)} with {called_melds} melds")

    if len(hand) == sizes[1] and is_winning_hand(hand, called_melds):
        return ShantenResult(shanten=-1, improvements=[])

    tiles_34 = tiles_to_34_array(hand)
    current = shanten_34(tiles_34, called_melds)
    return ShantenResult(
        shanten=current,
        improvements=find_improvements(tiles_34, current, called_melds),
    )


def shanten_34(tiles_34: List[int], called_melds: int = 0) -> int:
    """Minimum shanten over every pair choice (including none)."""
    melds_needed = 4 - called_melds

    def evaluate(head: Optional[int], remaining: Tuple[int, ...]) -> int:
        return _blocks_shanten(hand_blocks(remaining), melds_needed, head is not None)

    best = best_over_pair_candidates(
        tiles_34, evaluate, include_unpaired=True, floor=-1, default=WORST_SHANTEN)
    return max(best, -1)


def find_improvements(tiles_34: List[int], current: int,
                      called_melds: int = 0) -> List[str]:
    """Keys of tile kinds whose addition strictly lowers the shanten."""
    improvements = []
    for i in range(34):
        test = list(tiles_34)
        test[i] += 1
        if shanten_34(test, called_melds) < current:
            improvements.append(ALL_TILE_KEYS[i])
    return sorted(set(improvements))


def _blocks_shanten(blocks: Iterable[Blocks], melds_needed: int, has_pair: bool) -> int:
    best = 2 * melds_needed
    for melds, partials in blocks:
        melds = min(melds, melds_needed)
        partials = min(partials, melds_needed - melds)
        s = 2 * (melds_needed - melds) - partials - (1 if has_pair else 0)
        best = min(best, s)
    return best


def hand_blocks(tiles_34: Tuple[int, ...]) -> FrozenSet[Blocks]:
    """Best (melds, partials) trade-offs for a whole pair-less remainder."""
    combined = frozenset([honor_blocks(tiles_34[HONOR_RANGE[0]:HONOR_RANGE[1]])])
    for start, end in SUIT_RANGES:
        suit = suit_blocks(tuple(tiles_34[start:end]))
        combined = _pareto((m1 + m2, t1 + t2) for m1, t1 in combined for m2, t2 in suit)
    return combined


def honor_kind_blocks(count: int) -> Blocks:
    """Honors only form triplets; a leftover pair is one partial group."""
    return count // 3, 1 if count % 3 == 2 else 0


def honor_blocks(counts: Sequence[int]) -> Blocks:
    melds = partials = 0
    for count in counts:
        m, t = honor_kind_blocks(count)
        melds += m
        partials += t
    return melds, partials


@lru_cache(maxsize=None)
def suit_blocks(counts: Tuple[int, ...]) -> FrozenSet[Blocks]:
    """Pareto-best (melds, partials) for one numbered suit.

    The leftmost remaining tile is either left isolated or starts a triplet,
    run, pair, adjacent partial (12) or gapped partial (13).
    """
    idx = 0
    while idx < len(counts) and counts[idx] == 0:
        idx += 1
    if idx == len(counts):
        return frozenset([(0, 0)])

    options = set()

    def branch(used: Tuple[int, ...], melds: int, partials: int):
        for m, t in suit_blocks(_take(counts, used)):
            options.add((m + melds, t + partials))

    branch((idx,), 0, 0)
    if counts[idx] >= 3:
        branch((idx, idx, idx), 1, 0)
    if idx <= 6 and counts[idx + 1] and counts[idx + 2]:
        branch((idx, idx + 1, idx + 2), 1, 0)
    if counts[idx] >= 2:
        branch((idx, idx), 0, 1)
    if idx <= 7 and counts[idx + 1]:
        branch((idx, idx + 1), 0, 1)
    if idx <= 6 and counts[idx + 2]:
        branch((idx, idx + 2), 0, 1)

    return _pareto(options)


def _take(counts: Tuple[int, ...], used: Tuple[int, ...]) -> Tuple[int, ...]:
    tiles = list(counts)
    for i in used:
        tiles[i] -= 1
    return tuple(tiles)


def _pareto(blocks: Iterable[Blocks]) -> FrozenSet[Blocks]:
    """Drop (melds, partials) pairs dominated by another pair."""
    candidates = set(blocks)
    return frozenset(
        (m, t) for m, t in candidates
        if not any(m2 >= m and t2 >= t and (m2, t2) != (m, t) for m2, t2 in candidates)
    )
