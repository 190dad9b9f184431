"""
Abstract Rules Engine Interface

Key Principles:
    1. The position is an opaque, mutable handle owned by the rules engine
    2. apply() and undo() follow stack discipline: undo() exactly inverts
       the most recent apply()
    3. legal_moves() returns a finite sequence in a deterministic order
    4. The search only needs is_game_over(); the finer predicates exist for
       the game session
"""

from abc import ABC, abstractmethod
from typing import Any, List


class RulesEngine(ABC):
    """
    Abstract base class for rules engines.

    Methods:
        legal_moves(position): Legal moves in generator order
        apply(position, move): Make a move
        undo(position): Unmake the most recent move
        is_game_over(position): True if the game has ended
        side_to_move(position): Colour to move

    is_checkmate(), is_stalemate() and is_draw() are optional for search
    but required by GameSession, which refuses engines that lack them.
    """

    @abstractmethod
    def legal_moves(self, position: Any) -> List[Any]:
        """
        Generate legal moves for the side to move.

        Args:
            position: Position handle

        Returns:
            List of moves, always in the same order for the same position
        """
        pass

    @abstractmethod
    def apply(self, position: Any, move: Any) -> None:
        """Make a move on the position."""
        pass

    @abstractmethod
    def undo(self, position: Any) -> None:
        """
        Unmake the most recent move.

        Raises:
            SearchInvariantError: If there is no move to undo
        """
        pass

    @abstractmethod
    def is_game_over(self, position: Any) -> bool:
        pass

    @abstractmethod
    def side_to_move(self, position: Any) -> bool:
        pass

    def is_checkmate(self, position: Any) -> bool:
        raise NotImplementedError

    def is_stalemate(self, position: Any) -> bool:
        raise NotImplementedError

    def is_draw(self, position: Any) -> bool:
        raise NotImplementedError

    def validate_position(self, position: Any) -> None:
        """
        Reject position handles this rules engine cannot work with.

        Called once before a top-level search.

        Raises:
            TypeError: If the handle is not a position of this rules engine
        """
        if position is None:
            raise TypeError("position must not be None")

    def snapshot(self, position: Any) -> Any:
        """
        Cheap fingerprint of the position, compared before and after a search.

        Returns None when the rules engine offers no fingerprint.
        """
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
