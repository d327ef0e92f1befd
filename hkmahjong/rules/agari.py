"""Win (食糊) detection for the standard 4 melds + 1 pair form."""

from functools import lru_cache
from typing import List, Sequence, Tuple

from hkmahjong.core.tile import ALL_TILE_KEYS, Tile, tiles_to_34_array
from hkmahjong.rules.pairs import best_over_pair_candidates

# Suit slices of the 34-count array
SUIT_RANGES = ((0, 9), (9, 18), (18, 27))
HONOR_RANGE = (27, 34)


def is_winning_hand(hand: Sequence[Tile], called_melds: int = 0) -> bool:
    """Check if the concealed tiles form a complete hand.

    With no exposed melds the hand must have exactly 14 tiles; any other
    size is simply not a winning hand.
    """
    if len(hand) != 14 - 3 * called_melds:
        return False
    return is_complete_34(tiles_to_34_array(hand))


def is_complete_34(tiles_34: List[int]) -> bool:
    """Check a 34-count array for 1 pair + all remaining tiles in melds."""
    if sum(tiles_34) % 3 != 2:
        return False
    best = best_over_pair_candidates(
        tiles_34,
        lambda head, remaining: 0 if _all_melds(remaining) else 1,
        floor=0,
    )
    return best == 0


def _all_melds(tiles_34: Tuple[int, ...]) -> bool:
    for start, end in SUIT_RANGES:
        if not suit_decomposes(tiles_34[start:end]):
            return False
    start, end = HONOR_RANGE
    return all(c % 3 == 0 for c in tiles_34[start:end])


@lru_cache(maxsize=None)
def suit_decomposes(counts: Tuple[int, ...]) -> bool:
    """Whether one numbered suit splits exactly into triplets and runs.

    The leftmost tile must belong to either a triplet or a run starting at
    it; both are tried. Taking runs greedily first rejects e.g. 111234.
    """
    idx = 0
    while idx < len(counts) and counts[idx] == 0:
        idx += 1
    if idx == len(counts):
        return True

    tiles = list(counts)
    if tiles[idx] >= 3:
        tiles[idx] -= 3
        if suit_decomposes(tuple(tiles)):
            return True
        tiles[idx] += 3

    if idx <= 6 and tiles[idx + 1] >= 1 and tiles[idx + 2] >= 1:
        tiles[idx] -= 1
        tiles[idx + 1] -= 1
        tiles[idx + 2] -= 1
        if suit_decomposes(tuple(tiles)):
            return True

    return False


def get_waiting_tiles(hand: Sequence[Tile], called_melds: int = 0) -> List[str]:
    """Keys of every tile kind that would complete this hand.

    The hand should have 13 tiles (less 3 per exposed meld); other sizes
    have no waits.
    """
    if len(hand) != 13 - 3 * called_melds:
        return []

    tiles_34 = tiles_to_34_array(hand)
    waits = []
    for i in range(34):
        if tiles_34[i] >= 4:
            continue
        test = list(tiles_34)
        test[i] += 1
        if is_complete_34(test):
            waits.append(ALL_TILE_KEYS[i])
    return sorted(waits)
