"""
Material-Only Evaluation

Scores a position by summed piece values and nothing else: no piece-square
tables, mobility or king safety. Positions with equal material evaluate
identically wherever the pieces stand.

Evaluation Components:
    - Material: P=100, N=320, B=330, R=500, Q=900, K=0

The king is worth 0 because losing it is never scored numerically; the
rules engine reports checkmate and the search stops there.
"""

from types import MappingProxyType
from typing import Mapping, Optional

import chess
import numpy as np

from openclaw.board.representation import PIECE_TYPES, material_vector
from openclaw.evaluation.base import Evaluator


# ============================================================================
# Material Values (centipawns)
# ============================================================================

PIECE_VALUES: Mapping[int, int] = MappingProxyType({
    chess.PAWN: 100,
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 0,
})


def _weights(values: Mapping[int, int]) -> np.ndarray:
    weights = np.array([values.get(pt, 0) for pt in PIECE_TYPES], dtype=np.int64)
    weights.setflags(write=False)
    return weights


# Read-only weight vector aligned with material_vector()
PIECE_WEIGHTS = _weights(PIECE_VALUES)


class MaterialEvaluator(Evaluator):
    """
    Material counting evaluator.

    Attributes:
        piece_values: Read-only mapping of piece type to centipawns
        weights: Read-only numpy vector in PIECE_TYPES order
    """

    def __init__(self, piece_values: Optional[Mapping[int, int]] = None):
        """
        Args:
            piece_values: Optional override of the standard values; copied
                and frozen. Missing piece types are worth 0.
        """
        if piece_values is None:
            self.piece_values = PIECE_VALUES
            self.weights = PIECE_WEIGHTS
        else:
            unknown = set(piece_values) - set(PIECE_TYPES)
            if unknown:
                raise ValueError(f"Unknown piece types in value table: {sorted(unknown)}")
            self.piece_values = MappingProxyType(dict(piece_values))
            self.weights = _weights(self.piece_values)

    def evaluate(self, board: chess.Board) -> int:
        """
        Evaluate position by material.

        Args:
            board: Chess board to evaluate

        Returns:
            int: White material minus Black material, in centipawns
        """
        return int(np.dot(self.weights, material_vector(board)))

    def __repr__(self) -> str:
        if self.piece_values is PIECE_VALUES:
            return "MaterialEvaluator()"
        values = {chess.piece_symbol(pt): v for pt, v in self.piece_values.items()}
        return f"MaterialEvaluator(piece_values={values})"
