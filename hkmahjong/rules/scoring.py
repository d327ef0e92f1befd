"""Score calculation - count doubles (番) and convert them to points."""

from dataclasses import dataclass, field
from typing import List, Sequence, Union

from hkmahjong.core.tile import DRAGONS, Honor, Tile, tiles_to_34_array

BASE_POINTS = 10


@dataclass
class ScoreResult:
    """Result of score calculation."""
    score: int
    doubles: int
    details: List[str] = field(default_factory=list)


def points_for_doubles(doubles: int) -> int:
    return BASE_POINTS * 2 ** doubles


def score_hand(
    hand: Sequence[Tile],
    winning_tile: Tile,
    is_self_draw: bool,
    seat_wind: Union[Honor, str],
    prevalent_wind: Union[Honor, str],
) -> ScoreResult:
    """Score a completed hand.

    ``hand`` is the completed hand, winning tile included; it is not
    re-validated as winning. ``winning_tile`` is not counted separately.
    """
    seat_wind = Honor.parse(seat_wind)
    prevalent_wind = Honor.parse(prevalent_wind)

    tiles = list(hand)
    counts = tiles_to_34_array(tiles)

    details: List[str] = []
    doubles = 0

    details.append("Base score: 1 double")
    doubles += 1

    if is_self_draw:
        details.append("Self-draw: +1 double")
        doubles += 1

    if counts[seat_wind.index34] >= 3:
        details.append(f"Seat wind ({seat_wind.key_name}): +1 double")
        doubles += 1

    if counts[prevalent_wind.index34] >= 3 and prevalent_wind != seat_wind:
        details.append(f"Prevalent wind ({prevalent_wind.key_name}): +1 double")
        doubles += 1

    for dragon in DRAGONS:
        if counts[dragon.index34] >= 3:
            details.append(f"Dragon ({dragon.key_name}): +1 double")
            doubles += 1

    if all(t.is_honor for t in tiles):
        details.append("All honors: +3 doubles")
        doubles += 3

    return ScoreResult(score=points_for_doubles(doubles), doubles=doubles, details=details)
