"""
Search Module

This module implements the opponent's search: minimax with alpha-beta
pruning over a fixed depth, using the rules engine for move generation
and the evaluator at the leaves.

Key Components:
    - search: Core recursive search with alpha-beta pruning
    - full_minimax: Unpruned reference search
    - find_best_move: Root-level search returning a SearchResult
    - best_move: Root-level search returning only the move
    - Direction: Maximize / minimize for the side to move

"""

from openclaw.search.minimax import (
    Direction,
    SearchResult,
    SearchStats,
    best_move,
    find_best_move,
    full_minimax,
    search,
)

__all__ = [
    'search',
    'full_minimax',
    'find_best_move',
    'best_move',
    'Direction',
    'SearchResult',
    'SearchStats',
]
