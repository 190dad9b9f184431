"""
Game Module

Human vs. OpenClaw game flow: the human submits moves in SAN or UCI form,
the engine answers with find_best_move(), and the session classifies the
result once the game ends.

Key Components:
    - GameSession: Board, move history and turn handling
    - GameOutcome: status / result / reason triple
    - MoveRecord: One entry of the move history
"""

from openclaw.game.session import GameOutcome, GameSession, MoveRecord

__all__ = ['GameSession', 'GameOutcome', 'MoveRecord']
