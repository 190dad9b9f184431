"""
Rules Engine Module

The search never inspects chess rules itself. Legal move generation,
make/unmake and game-over detection are delegated to a rules engine
through the narrow RulesEngine interface.

Key Components:
    - RulesEngine (ABC): Interface the search and game session consume
    - ChessRules: Adapter over python-chess Board objects

"""

from openclaw.rules.base import RulesEngine
from openclaw.rules.chess_rules import ChessRules

__all__ = ['RulesEngine', 'ChessRules']
