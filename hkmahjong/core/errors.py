"""Error types raised by the hand-evaluation core."""


class MahjongError(Exception):
    """Base class for all errors raised by hkmahjong."""


class InvalidHandSizeError(MahjongError, ValueError):
    """Hand length is not valid for shanten or advice analysis."""


class InvalidArgumentError(MahjongError, ValueError):
    """An argument is outside its allowed range (e.g. number of players)."""


class InsufficientTilesError(MahjongError, ValueError):
    """The wall ran out of tiles while dealing."""


class WallInvariantError(MahjongError, RuntimeError):
    """Wall construction produced the wrong number of tiles.

    This is a programming error and is never expected in correct operation.
    """
