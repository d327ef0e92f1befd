"""Advisor input and output structures."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from hkmahjong.core.meld import CallOption, Meld
from hkmahjong.core.tile import Honor, Tile


class AdviceAction(Enum):
    DISCARD = "discard"
    KEEP = "keep"
    CALL = "call"


@dataclass
class GameSummary:
    """Everything the advisor needs to know about the local player's turn.

    Attributes:
        hand: Concealed tiles (13, less 3 per exposed meld)
        drawn_tile: Tile just drawn, if it is the player's turn
        available_calls: Claims possible on the last discard
        round_number: Round counter, for the summary text
        seat_wind: The player's own wind (an Honor, its name or its glyph)
        prevalent_wind: Wind of the round, coerced the same way
        bonus_tiles: Bonus indicators (always empty for Hong Kong basic rules)
        melds: Melds the player has already exposed
    """
    hand: List[Tile]
    drawn_tile: Optional[Tile] = None
    available_calls: List[CallOption] = field(default_factory=list)
    round_number: int = 1
    seat_wind: Honor = Honor.EAST
    prevalent_wind: Honor = Honor.EAST
    bonus_tiles: List[Tile] = field(default_factory=list)
    melds: List[Meld] = field(default_factory=list)

    def __post_init__(self):
        self.seat_wind = Honor.parse(self.seat_wind)
        self.prevalent_wind = Honor.parse(self.prevalent_wind)

    @property
    def current_hand(self) -> List[Tile]:
        """Concealed tiles including the drawn tile."""
        if self.drawn_tile is None:
            return list(self.hand)
        return list(self.hand) + [self.drawn_tile]

    @property
    def called_melds(self) -> int:
        return len(self.melds)


@dataclass
class AdviceAlternative:
    action: AdviceAction
    tile: Optional[Tile]
    reasoning: str
    priority: int
    call: Optional[CallOption] = None


@dataclass
class AdviceResult:
    """Recommended action.

    ``priority`` runs from 1 to 10, higher is more urgent. ``call`` is set
    for CALL recommendations.
    """
    action: AdviceAction
    tile: Optional[Tile]
    reasoning: str
    priority: int
    alternatives: List[AdviceAlternative] = field(default_factory=list)
    call: Optional[CallOption] = None
