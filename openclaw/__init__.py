"""
OpenClaw Opponent Engine

The move-selection engine behind the OpenClaw chess opponent: a fixed-depth
minimax search with alpha-beta pruning over a material-only evaluation.
The human plays White and OpenClaw answers as Black.

## Architecture

The engine is organized into several key modules:

1. **rules**: Rules engine boundary
   - Abstract RulesEngine interface (legal moves, apply/undo, game over)
   - ChessRules: python-chess adapter

2. **board**: Board helpers
   - Signed per-piece-type material vector (numpy)
   - Colour-mirrored positions for symmetry checks

3. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: P=100, N=320, B=330, R=500, Q=900, K=0

4. **search**: Search algorithms
   - search: Minimax with alpha-beta pruning
   - full_minimax: The same walk without pruning (reference)
   - find_best_move / best_move: Root move selection with random fallback

5. **game**: Human vs. engine game session
   - Move parsing (SAN or UCI), engine replies, outcome classification

6. **utils**: Tactical position suite and suite runner

## Quick Start

```python
import chess
from openclaw.search import best_move

board = chess.Board()
board.push_san("e4")

move = best_move(board, depth=3, maximizing_side=False)
print(f"OpenClaw plays: {board.san(move)}")
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from openclaw.config import EngineConfig
from openclaw.evaluation import Evaluator, MaterialEvaluator
from openclaw.exceptions import (
    GameOverError,
    IllegalMoveError,
    OpenClawError,
    SearchInvariantError,
)
from openclaw.game import GameSession
from openclaw.rules import ChessRules, RulesEngine
from openclaw.search import best_move, find_best_move, full_minimax, search

__all__ = [
    'EngineConfig',
    'Evaluator',
    'MaterialEvaluator',
    'RulesEngine',
    'ChessRules',
    'search',
    'full_minimax',
    'find_best_move',
    'best_move',
    'GameSession',
    'OpenClawError',
    'SearchInvariantError',
    'IllegalMoveError',
    'GameOverError',
]
