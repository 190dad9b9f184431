"""
Human vs. engine game session.

By default the human plays White and OpenClaw plays Black at depth 3.
Moves are accepted in SAN ("Nf3") or UCI ("g1f3"); a UCI pawn move onto
the last rank without a promotion letter promotes to a queen.

Outcome classification:
    checkmate                 -> finished, winner = side that moved, "checkmate"
    stalemate                 -> finished, draw, "stalemate"
    any other draw by rule    -> finished, draw, "draw"
    otherwise                 -> active
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

import chess

from openclaw.config import EngineConfig
from openclaw.evaluation.base import Evaluator
from openclaw.evaluation.material import MaterialEvaluator
from openclaw.exceptions import GameOverError, IllegalMoveError
from openclaw.rules.base import RulesEngine
from openclaw.rules.chess_rules import ChessRules
from openclaw.search.minimax import find_best_move

logger = logging.getLogger(__name__)

ACTIVE = "active"
FINISHED = "finished"

# RulesEngine predicates outcome() relies on; optional for search-only engines.
OUTCOME_PREDICATES = ("is_checkmate", "is_stalemate", "is_draw")


@dataclass
class MoveRecord:
    """One half-move of the game history."""

    number: int
    color: str
    san: str
    uci: str
    by_engine: bool = False
    score: Optional[int] = None


@dataclass(frozen=True)
class GameOutcome:
    """
    Game status.

    Attributes:
        status: "active" or "finished"
        result: "white", "black", "draw", or None while active
        reason: "checkmate", "stalemate", "draw", or None while active
    """

    status: str
    result: Optional[str] = None
    reason: Optional[str] = None

    @property
    def is_over(self) -> bool:
        return self.status == FINISHED


def _color_name(color: bool) -> str:
    return "white" if color == chess.WHITE else "black"


class GameSession:
    """
    A game between a human and the engine.

    A custom rules engine must implement is_checkmate(), is_stalemate()
    and is_draw() in addition to the search methods.

    Attributes:
        board: Current position
        config: Engine configuration (depth, engine side, ...)
        rules: Rules engine used for move legality and game over
        evaluator: Evaluator used by the engine
        history: MoveRecords in the order played
    """

    def __init__(
        self,
        board: Optional[chess.Board] = None,
        config: Optional[EngineConfig] = None,
        evaluator: Optional[Evaluator] = None,
        rules: Optional[RulesEngine] = None,
    ):
        self.config = config if config else EngineConfig()
        self.board = board if board is not None else chess.Board()
        self.initial_fen = self.board.fen()
        self.rules = rules if rules else ChessRules(claim_draw=self.config.claim_draw)
        self.evaluator = evaluator if evaluator else MaterialEvaluator()

        missing = [
            name
            for name in OUTCOME_PREDICATES
            if getattr(type(self.rules), name) is getattr(RulesEngine, name)
        ]
        if missing:
            raise TypeError(
                f"{type(self.rules).__name__} does not implement {', '.join(missing)}"
            )
        self.rng = random.Random(self.config.seed)
        self.history: List[MoveRecord] = []

        logger.info(f"New game: {self.config}")

    @property
    def engine_color(self) -> bool:
        return chess.WHITE if self.config.maximizing else chess.BLACK

    @property
    def human_color(self) -> bool:
        return not self.engine_color

    def legal_moves_uci(self) -> List[str]:
        return [move.uci() for move in self.rules.legal_moves(self.board)]

    def parse_move(self, text: str) -> chess.Move:
        """
        Parse a SAN or UCI move in the current position.

        Raises:
            IllegalMoveError: If the text is not a legal move
        """
        text = text.strip()

        try:
            move = self.board.parse_san(text)
        except ValueError:
            pass
        else:
            # parse_san() accepts "--" and friends as a null move
            if not move:
                raise IllegalMoveError(text, self.legal_moves_uci())
            return move

        try:
            move = chess.Move.from_uci(text)
        except ValueError:
            raise IllegalMoveError(text, self.legal_moves_uci()) from None

        if move.promotion is None and self._is_promotion_square(move):
            move = chess.Move(move.from_square, move.to_square, promotion=chess.QUEEN)

        if not move or move not in self.board.legal_moves:
            raise IllegalMoveError(text, self.legal_moves_uci())

        return move

    def _is_promotion_square(self, move: chess.Move) -> bool:
        piece = self.board.piece_at(move.from_square)
        if piece is None or piece.piece_type != chess.PAWN:
            return False
        last_rank = 7 if piece.color == chess.WHITE else 0
        return chess.square_rank(move.to_square) == last_rank

    def outcome(self) -> GameOutcome:
        """Classify the current position."""
        if self.rules.is_checkmate(self.board):
            winner = _color_name(not self.rules.side_to_move(self.board))
            return GameOutcome(FINISHED, winner, "checkmate")
        if self.rules.is_stalemate(self.board):
            return GameOutcome(FINISHED, "draw", "stalemate")
        if self.rules.is_draw(self.board):
            return GameOutcome(FINISHED, "draw", "draw")
        return GameOutcome(ACTIVE)

    def _record(self, move: chess.Move, by_engine: bool, score: Optional[int] = None) -> MoveRecord:
        record = MoveRecord(
            number=self.board.fullmove_number,
            color="w" if self.board.turn == chess.WHITE else "b",
            san=self.board.san(move),
            uci=move.uci(),
            by_engine=by_engine,
            score=score,
        )
        self.rules.apply(self.board, move)
        self.history.append(record)
        return record

    def _ensure_active(self) -> None:
        outcome = self.outcome()
        if outcome.is_over:
            raise GameOverError(f"Game over: {outcome.result} ({outcome.reason})")

    def play_human_move(self, text: str) -> MoveRecord:
        """
        Play the human's move.

        Args:
            text: Move in SAN or UCI notation

        Returns:
            MoveRecord of the move played

        Raises:
            GameOverError: If the game has finished
            IllegalMoveError: If it is not the human's turn or the move is
                not legal
        """
        self._ensure_active()

        if self.rules.side_to_move(self.board) != self.human_color:
            raise IllegalMoveError(text, reason="not your turn")

        move = self.parse_move(text)
        record = self._record(move, by_engine=False)
        logger.info(f"Human played {record.san}")
        return record

    def play_engine_move(self) -> Optional[MoveRecord]:
        """
        Search and play the engine's reply.

        Returns:
            MoveRecord of the engine move, or None if it has no legal move

        Raises:
            GameOverError: If the game has finished
            IllegalMoveError: If it is not the engine's turn
        """
        self._ensure_active()

        if self.rules.side_to_move(self.board) != self.engine_color:
            raise IllegalMoveError("(engine)", reason="not the engine's turn")

        result = find_best_move(
            self.board,
            self.config.depth,
            self.config.maximizing,
            evaluator=self.evaluator,
            rules=self.rules,
            prune=self.config.prune,
            rng=self.rng,
        )
        if result.move is None:
            return None

        record = self._record(result.move, by_engine=True, score=result.score)
        logger.info(f"Found move: {record.san} (score {record.score}, nodes {result.nodes})")
        return record

    def reset(self) -> None:
        """Start a new game from the position the session was created with."""
        self.board = chess.Board(self.initial_fen)
        self.history.clear()
        self.rng = random.Random(self.config.seed)
        logger.info("Game reset")
