"""
Board Helpers Module

Small numpy views of a python-chess Board used by the evaluator and the
symmetry tests.

Key Components:
    - piece_counts: (2, 6) array of piece counts per colour and type
    - material_vector: signed per-type counts (White minus Black)
    - mirror: colour-reversed copy of a position

Data Flow:
    python-chess Board → material_vector() → (6,) int array → Evaluator
"""

from openclaw.board.representation import (
    PIECE_TYPES,
    material_vector,
    mirror,
    piece_counts,
)

__all__ = ['PIECE_TYPES', 'piece_counts', 'material_vector', 'mirror']
