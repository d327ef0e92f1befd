"""Tile definition: suit/value kinds, canonical keys and 34-slot counting."""

import itertools
from enum import IntEnum
from typing import Iterable, List, Optional, Union


class TileSuit(IntEnum):
    MAN = 0    # 万子 (characters)
    PIN = 1    # 筒子 (dots)
    SOU = 2    # 索子 (bamboo)
    HONOR = 3  # 字牌 (winds + dragons)

    @property
    def key_name(self) -> str:
        return self.name.lower()

    @property
    def short(self) -> str:
        return 'mpsz'[self.value]


class Honor(IntEnum):
    EAST = 0   # 東
    SOUTH = 1  # 南
    WEST = 2   # 西
    NORTH = 3  # 北
    RED = 4    # 中
    GREEN = 5  # 發
    WHITE = 6  # 白

    @property
    def key_name(self) -> str:
        return self.name.lower()

    @property
    def glyph(self) -> str:
        return HONOR_GLYPHS[self.value]

    @property
    def is_wind(self) -> bool:
        return self.value <= 3

    @property
    def is_dragon(self) -> bool:
        return self.value >= 4

    @property
    def index34(self) -> int:
        return 27 + self.value

    @classmethod
    def parse(cls, value: Union['Honor', str]) -> 'Honor':
        """Accept a member, its name ('east') or its glyph ('東')."""
        if isinstance(value, Honor):
            return value
        text = str(value).strip()
        if text in HONOR_GLYPHS:
            return cls(HONOR_GLYPHS.index(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"unknown honor tile: {value!r}") from None


HONOR_GLYPHS = ["東", "南", "西", "北", "中", "發", "白"]

WINDS = (Honor.EAST, Honor.SOUTH, Honor.WEST, Honor.NORTH)
DRAGONS = (Honor.RED, Honor.GREEN, Honor.WHITE)

NUMBER_SUITS = (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU)

# Tile names for 34 encoding
TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
] + HONOR_GLYPHS

TileValue = Union[int, Honor]

_auto_ids = itertools.count()


class Tile:
    """Immutable tile instance.

    Two tiles are the same *kind* when suit and value match; they are the
    same *instance* only when their ids match. ``==`` and ``hash`` follow the
    instance id; use :meth:`same_kind` or :func:`tiles_equal` to compare kinds.
    """
    __slots__ = ('_suit', '_value', '_id', '_index34')

    def __init__(self, suit: TileSuit, value: Union[int, Honor, str],
                 tile_id: Optional[str] = None):
        suit = TileSuit(suit)
        if suit == TileSuit.HONOR:
            value = Honor.parse(value)
            index34 = value.index34
        else:
            if isinstance(value, Honor) or not isinstance(value, int):
                raise ValueError(f"numbered tile needs an int value, got {value!r}")
            if not (1 <= value <= 9):
                raise ValueError(f"numbered tile value must be 1..9, got {value}")
            index34 = suit.value * 9 + value - 1
        self._suit = suit
        self._value = value
        self._index34 = index34
        if tile_id is None:
            tile_id = f"{self.key}-#{next(_auto_ids)}"
        self._id = tile_id

    @property
    def id(self) -> str:
        return self._id

    @property
    def suit(self) -> TileSuit:
        return self._suit

    @property
    def value(self) -> TileValue:
        return self._value

    @property
    def index34(self) -> int:
        return self._index34

    @property
    def key(self) -> str:
        """Canonical kind key, e.g. ``man-9`` or ``honor-east``."""
        return tile_key_from_index34(self._index34)

    @property
    def name(self) -> str:
        return TILE_NAMES_34[self._index34]

    @property
    def is_honor(self) -> bool:
        return self._suit == TileSuit.HONOR

    @property
    def is_number_tile(self) -> bool:
        return not self.is_honor

    @property
    def is_terminal(self) -> bool:
        return not self.is_honor and self._value in (1, 9)

    @property
    def is_wind(self) -> bool:
        return self.is_honor and self._value.is_wind

    @property
    def is_dragon(self) -> bool:
        return self.is_honor and self._value.is_dragon

    def same_kind(self, other: 'Tile') -> bool:
        return self._index34 == other._index34

    def __repr__(self):
        return f"Tile({self.name})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._id == other._id
        return NotImplemented

    def __hash__(self):
        return hash(self._id)

    def __lt__(self, other):
        if isinstance(other, Tile):
            if self._index34 != other._index34:
                return self._index34 < other._index34
            return self._id < other._id
        return NotImplemented


def tile_key_from_index34(index34: int) -> str:
    """Canonical key for a 34-encoding index."""
    if index34 >= 27:
        return f"honor-{Honor(index34 - 27).key_name}"
    suit = NUMBER_SUITS[index34 // 9]
    return f"{suit.key_name}-{index34 % 9 + 1}"


ALL_TILE_KEYS = [tile_key_from_index34(i) for i in range(34)]


def tile_from_index34(index34: int, tile_id: Optional[str] = None) -> Tile:
    if not (0 <= index34 < 34):
        raise ValueError(f"index34 must be 0..33, got {index34}")
    if index34 >= 27:
        return Tile(TileSuit.HONOR, Honor(index34 - 27), tile_id)
    return Tile(NUMBER_SUITS[index34 // 9], index34 % 9 + 1, tile_id)


def tiles_equal(a: Tile, b: Tile) -> bool:
    """Equality by kind (suit + value), ignoring instance ids."""
    return a.same_kind(b)


def sort_tiles(tiles: Iterable[Tile]) -> List[Tile]:
    """Display order: man, pin, sou, then winds and dragons."""
    return sorted(tiles)


def tiles_to_34_array(tiles: Iterable[Tile]) -> List[int]:
    """Convert list of tiles to 34-length count array."""
    arr = [0] * 34
    for t in tiles:
        arr[t.index34] += 1
    return arr


_HONOR_LETTERS = {
    'E': Honor.EAST, 'S': Honor.SOUTH, 'W': Honor.WEST, 'N': Honor.NORTH,
    'R': Honor.RED, 'G': Honor.GREEN, 'H': Honor.WHITE,
}


def make_tiles_from_string(s: str) -> List[Tile]:
    """Parse a shorthand string like '123m456p789s東東' into tiles.

    Honors are written as glyphs (東南西北中發白) or as the letters
    E S W N (winds) R G H (red, green, white). Every tile gets a fresh id.
    """
    tiles = []
    numbers: List[int] = []
    for ch in s:
        if ch.isdigit():
            numbers.append(int(ch))
        elif ch in ('m', 'p', 's'):
            suit = {'m': TileSuit.MAN, 'p': TileSuit.PIN, 's': TileSuit.SOU}[ch]
            for n in numbers:
                tiles.append(Tile(suit, n))
            numbers = []
        elif ch in HONOR_GLYPHS:
            tiles.append(Tile(TileSuit.HONOR, Honor.parse(ch)))
        elif ch in _HONOR_LETTERS:
            tiles.append(Tile(TileSuit.HONOR, _HONOR_LETTERS[ch]))
        elif ch.isspace():
            continue
        else:
            raise ValueError(f"unexpected character {ch!r} in tile string {s!r}")
    if numbers:
        raise ValueError(f"digits without a suit letter in tile string {s!r}")
    return tiles
