"""
Exceptions raised by the OpenClaw engine.

Search itself has no recoverable error path: an empty move list is reported
as ``None`` and misuse (negative depth, foreign position handle) raises the
builtin ``ValueError`` / ``TypeError`` before any move is made. The classes
below cover broken apply/undo pairing and the game session layer.
"""


class OpenClawError(Exception):
    """Base class for all OpenClaw errors."""


class SearchInvariantError(OpenClawError, RuntimeError):
    """
    The position was not restored by the search.

    Raised when an undo is requested with nothing left to undo, or when the
    position differs from its pre-search state after the top-level call.
    Always a programming error; never caught inside the package.
    """


class IllegalMoveError(OpenClawError, ValueError):
    """A move submitted to a game session is not legal in the position."""

    def __init__(self, move_text: str, legal_moves=None, reason: str = ""):
        self.move_text = move_text
        self.legal_moves = list(legal_moves or [])
        self.reason = reason
        message = f"Invalid move: {move_text}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class GameOverError(OpenClawError):
    """A move was requested after the game finished."""
