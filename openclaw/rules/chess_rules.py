"""
python-chess Rules Adapter

Maps the RulesEngine interface onto chess.Board:
    legal_moves  -> list(board.legal_moves)
    apply / undo -> board.push() / board.pop()
    is_game_over -> board.is_game_over(claim_draw=...)

By default only the automatic draws (fivefold repetition, seventy-five
moves) end the game. With claim_draw=True threefold repetition and the
fifty-move rule end it as soon as they can be claimed; python-chess checks
that by replaying the move stack and probing every legal move, which makes
each node several times more expensive.
"""

from typing import List, Tuple

import chess

from openclaw.exceptions import SearchInvariantError
from openclaw.rules.base import RulesEngine


class ChessRules(RulesEngine):
    """
    Rules engine backed by python-chess.

    Attributes:
        claim_draw: Treat claimable draws as game over
    """

    def __init__(self, claim_draw: bool = False):
        self.claim_draw = claim_draw

    def legal_moves(self, position: chess.Board) -> List[chess.Move]:
        return list(position.legal_moves)

    def apply(self, position: chess.Board, move: chess.Move) -> None:
        position.push(move)

    def undo(self, position: chess.Board) -> None:
        if not position.move_stack:
            raise SearchInvariantError("undo() called with an empty move stack")
        position.pop()

    def is_game_over(self, position: chess.Board) -> bool:
        return position.is_game_over(claim_draw=self.claim_draw)

    def side_to_move(self, position: chess.Board) -> bool:
        return position.turn

    def is_checkmate(self, position: chess.Board) -> bool:
        return position.is_checkmate()

    def is_stalemate(self, position: chess.Board) -> bool:
        return position.is_stalemate()

    def is_draw(self, position: chess.Board) -> bool:
        """
        Check if position is a draw by rule.

            - Stalemate
            - Insufficient material
            - Fifty-move / seventy-five-move rule
            - Threefold / fivefold repetition
        """
        if position.is_stalemate() or position.is_insufficient_material():
            return True
        if position.is_seventyfive_moves() or position.is_fivefold_repetition():
            return True
        if self.claim_draw:
            return position.can_claim_draw()
        return False

    def validate_position(self, position: chess.Board) -> None:
        if not isinstance(position, chess.Board):
            raise TypeError(
                f"ChessRules expects a chess.Board, got {type(position).__name__}"
            )

    def snapshot(self, position: chess.Board) -> Tuple[str, int]:
        return position.fen(), len(position.move_stack)

    def __repr__(self) -> str:
        return f"ChessRules(claim_draw={self.claim_draw})"
