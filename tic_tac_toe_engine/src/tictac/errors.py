"""Errors raised by the rules and decision engines."""


class GameError(ValueError):
    """Base class for every rejected game operation."""


# PUBLIC_INTERFACE
class OutOfRange(GameError):
    """Cell index is not on the board (0..8)."""


# PUBLIC_INTERFACE
class IllegalMove(GameError):
    """Cell already taken, game already over, or unknown mark."""


# PUBLIC_INTERFACE
class NoLegalMove(GameError):
    """The decision engine was asked to move on a full or finished board."""


# PUBLIC_INTERFACE
class InvalidBoard(GameError):
    """A board received from outside does not describe a reachable position."""
