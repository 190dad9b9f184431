"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, the search can run against any evaluator
without modification (tests rely on this to pin evaluations).

Key Principles:
    1. Evaluators are pure: same position, same score
    2. evaluate() always returns centipawns from White's perspective
    3. Positive = White advantage, Negative = Black advantage
    4. Checkmate is not scored here; the rules engine detects it and the
       search stops at that node

Convention:
    - Material values in centipawns (pawn = 100, queen = 900)
    - Return 0 for materially equal positions
    - The sign convention never changes during a search
"""

from abc import ABC, abstractmethod
import chess


# Search bounds. Every reachable score lies strictly between -SCORE_SENTINEL
# and SCORE_SENTINEL; a full board of material is only a few thousand.
SCORE_SENTINEL = 99999
WINDOW_BOUND = 100000


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method.

    Methods:
        evaluate(board): Returns position evaluation in centipawns
    """

    @abstractmethod
    def evaluate(self, board: chess.Board) -> int:
        """
        Evaluate a chess position from White's perspective.

        Args:
            board: python-chess Board object to evaluate

        Returns:
            int: Evaluation in centipawns
        """
        pass

    def __call__(self, board: chess.Board) -> int:
        return self.evaluate(board)

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
