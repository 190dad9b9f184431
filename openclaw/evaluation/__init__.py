"""
Evaluation Module

This module provides position evaluation functions for the engine.
Evaluators are SWAPPABLE: the search works with any evaluator that
implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Material counting only

Data Flow:
    chess.Board → evaluator.evaluate() → int (centipawns)
                                         Positive = White advantage
                                         Negative = Black advantage

"""

from openclaw.evaluation.base import Evaluator, SCORE_SENTINEL, WINDOW_BOUND
from openclaw.evaluation.material import MaterialEvaluator, PIECE_VALUES, PIECE_WEIGHTS

__all__ = [
    'Evaluator',
    'MaterialEvaluator',
    'PIECE_VALUES',
    'PIECE_WEIGHTS',
    'SCORE_SENTINEL',
    'WINDOW_BOUND',
]
