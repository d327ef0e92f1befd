"""Meld data structures and claim options for Chow/Pung/Kong."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .tile import Tile


class MeldType(Enum):
    SEQUENCE = "sequence"              # 上 (chow)
    TRIPLET = "triplet"                # 碰 (pung)
    QUAD = "quad"                      # 明槓 (exposed kong)
    CONCEALED_QUAD = "concealed-quad"  # 暗槓


class CallType(Enum):
    SEQUENCE_CLAIM = "sequence-claim"
    TRIPLET_CLAIM = "triplet-claim"
    QUAD_CLAIM = "quad-claim"

    @property
    def meld_type(self) -> MeldType:
        return {
            CallType.SEQUENCE_CLAIM: MeldType.SEQUENCE,
            CallType.TRIPLET_CLAIM: MeldType.TRIPLET,
            CallType.QUAD_CLAIM: MeldType.QUAD,
        }[self]


@dataclass(frozen=True)
class Meld:
    """A frozen meld.

    Attributes:
        meld_type: Type of meld
        tiles: All tiles in the meld (3, or 4 for quads)
        from_player: Seat the claimed tile came from (None for concealed melds)
    """
    meld_type: MeldType
    tiles: tuple  # tuple of Tile
    from_player: Optional[int] = None

    def __post_init__(self):
        expected = 4 if self.is_quad else 3
        if len(self.tiles) != expected:
            raise ValueError(
                f"{self.meld_type.value} meld needs {expected} tiles, got {len(self.tiles)}")

    @property
    def is_open(self) -> bool:
        return self.meld_type != MeldType.CONCEALED_QUAD

    @property
    def is_quad(self) -> bool:
        return self.meld_type in (MeldType.QUAD, MeldType.CONCEALED_QUAD)

    @property
    def tile_index34(self) -> int:
        """The 34 index of the meld's lowest tile."""
        return min(t.index34 for t in self.tiles)


@dataclass(frozen=True)
class CallOption:
    """A meld that could be exposed by claiming another player's discard.

    ``claimed_tile`` is the discard being claimed; when omitted the first
    tile of ``tiles`` is taken to be the claimed one.
    """
    call_type: CallType
    tiles: tuple  # tuple of Tile, claimed tile included
    from_player: int
    claimed_tile: Optional[Tile] = None

    @property
    def claimed(self) -> Tile:
        return self.claimed_tile if self.claimed_tile is not None else self.tiles[0]

    @property
    def hand_tiles(self) -> tuple:
        """Tiles the caller must supply from their own hand."""
        claimed = self.claimed
        rest = list(self.tiles)
        for i, t in enumerate(rest):
            if t == claimed:
                del rest[i]
                return tuple(rest)
        # Claimed tile given separately from the meld tiles: match by kind
        for i, t in enumerate(rest):
            if t.same_kind(claimed):
                del rest[i]
                break
        return tuple(rest)

    def to_meld(self) -> Meld:
        return Meld(self.call_type.meld_type, tuple(self.tiles), self.from_player)
