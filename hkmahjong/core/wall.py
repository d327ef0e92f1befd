"""Wall construction, dealing and drawing."""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from .errors import InsufficientTilesError, InvalidArgumentError, WallInvariantError
from .tile import Honor, NUMBER_SUITS, Tile, TileSuit

logger = logging.getLogger(__name__)

# Full Hong Kong set including 8 flower/season tiles, which are not generated.
WALL_SIZE = 144
# 34 kinds x 4 copies actually built by create_wall.
PLAYABLE_TILE_COUNT = 136
HAND_SIZE = 13
DRAWN_HAND_SIZE = 14
COPIES_PER_KIND = 4


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1), e.g. ``random.Random``."""

    def random(self) -> float:
        ...


class SeededRNG:
    """Deterministic linear congruential generator (for reproducible walls)."""

    MODULUS = 0x100000000
    MULTIPLIER = 1664525
    INCREMENT = 1013904223

    def __init__(self, seed: int = 12345):
        self._state = seed % self.MODULUS

    def random(self) -> float:
        self._state = (self._state * self.MULTIPLIER + self.INCREMENT) % self.MODULUS
        return self._state / self.MODULUS


def shuffle_tiles(tiles: Sequence[Tile], rng: RandomSource) -> List[Tile]:
    """Fisher-Yates shuffle into a new list."""
    result = list(tiles)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def build_tiles() -> List[Tile]:
    """All playable tiles in canonical (unshuffled) order."""
    tiles = []
    for suit in NUMBER_SUITS:
        for value in range(1, 10):
            for copy in range(COPIES_PER_KIND):
                tiles.append(Tile(suit, value, f"{suit.key_name}-{value}-{copy}"))
    for honor in Honor:
        for copy in range(COPIES_PER_KIND):
            tiles.append(Tile(TileSuit.HONOR, honor, f"honor-{honor.key_name}-{copy}"))
    return tiles


def create_wall(seed: Optional[int] = None,
                rng: Optional[RandomSource] = None) -> List[Tile]:
    """Build and shuffle a wall.

    A seed gives a reproducible order via :class:`SeededRNG`. Otherwise the
    injected ``rng`` is used, falling back to a fresh ``random.Random``.
    """
    tiles = build_tiles()
    if len(tiles) != PLAYABLE_TILE_COUNT:
        raise WallInvariantError(
            f"Wall should have {PLAYABLE_TILE_COUNT} tiles, got {len(tiles)}")

    if seed is not None:
        logger.debug("Shuffling wall with seed %d", seed)
        rng = SeededRNG(seed)
    elif rng is None:
        rng = random.Random()
    return shuffle_tiles(tiles, rng)


@dataclass
class DealResult:
    hands: List[List[Tile]]
    remaining: List[Tile] = field(default_factory=list)


@dataclass
class DrawResult:
    tile: Optional[Tile]
    remaining: List[Tile] = field(default_factory=list)


def deal_hands(wall: Sequence[Tile], num_players: int = 4) -> DealResult:
    """Deal 13 tiles to each player round-robin, keeping wall order."""
    if not (2 <= num_players <= 4):
        raise InvalidArgumentError("Number of players must be between 2 and 4")

    needed = HAND_SIZE * num_players
    if len(wall) < needed:
        raise InsufficientTilesError(
            f"Not enough tiles in wall for dealing: need {needed}, have {len(wall)}")

    hands: List[List[Tile]] = [[] for _ in range(num_players)]
    wall_index = 0
    for _ in range(HAND_SIZE):
        for player in range(num_players):
            hands[player].append(wall[wall_index])
            wall_index += 1

    return DealResult(hands=hands, remaining=list(wall[wall_index:]))


def draw_tile(wall: Sequence[Tile]) -> DrawResult:
    """Take the head tile. An empty wall yields ``DrawResult(None, [])``."""
    if not wall:
        return DrawResult(tile=None, remaining=[])
    return DrawResult(tile=wall[0], remaining=list(wall[1:]))
