"""
Minimax Search with Alpha-Beta Pruning

This module implements the opponent's move selection. Minimax explores the
game tree to a fixed depth and alpha-beta pruning skips branches that
cannot change the result.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Optimization that prunes branches that can't affect result
    - Move Order: The rules engine's generator order, never re-sorted; the
      first move reaching the best value wins ties
    - Make/Unmake: One shared position, every apply() paired with undo()

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor (~35), d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

Pruning never changes the value: search() with pruning returns exactly what
full_minimax() returns for the same window.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

import chess

from openclaw.evaluation.base import Evaluator, SCORE_SENTINEL, WINDOW_BOUND
from openclaw.evaluation.material import MaterialEvaluator
from openclaw.exceptions import SearchInvariantError
from openclaw.rules.base import RulesEngine
from openclaw.rules.chess_rules import ChessRules

logger = logging.getLogger(__name__)


class Direction(Enum):
    """
    Optimization direction of the side to move.

    MAXIMIZE is White's direction (scores are from White's perspective),
    MINIMIZE is Black's.
    """

    MAXIMIZE = 1
    MINIMIZE = -1

    @classmethod
    def for_side(cls, maximizing: bool) -> "Direction":
        return cls.MAXIMIZE if maximizing else cls.MINIMIZE

    @property
    def sentinel(self) -> int:
        """Initial best value, worse than any reachable score."""
        return -self.value * SCORE_SENTINEL

    def pick(self, best: int, value: int) -> int:
        return max(best, value) if self is Direction.MAXIMIZE else min(best, value)

    def improves(self, value: int, best: int) -> bool:
        """Strict improvement; equal values do not replace the incumbent."""
        return value * self.value > best * self.value

    def narrow(self, alpha: int, beta: int, best: int):
        """Raise alpha (maximizing) or lower beta (minimizing) towards best."""
        if self is Direction.MAXIMIZE:
            return max(alpha, best), beta
        return alpha, min(beta, best)


@dataclass
class SearchStats:
    """Counters collected during one search."""

    nodes: int = 0
    cutoffs: int = 0


@dataclass
class SearchResult:
    """
    Outcome of a root search.

    Attributes:
        move: Chosen move, None when there are no legal moves
        score: Minimax value of the chosen move (None without moves)
        depth: Requested depth
        nodes: Positions visited below the root
        cutoffs: Number of beta <= alpha cutoffs
        fallback_used: True if the move was drawn at random because no
            move improved on the sentinel
        scores: Root move scores in generator order
    """

    move: Optional[chess.Move]
    score: Optional[int]
    depth: int
    nodes: int = 0
    cutoffs: int = 0
    fallback_used: bool = False
    scores: List[int] = field(default_factory=list)


_DEFAULT_RULES = ChessRules()
_DEFAULT_EVALUATOR = MaterialEvaluator()


def _check_depth(depth: int) -> None:
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise ValueError(f"depth must be an integer, got {depth!r}")
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")


def _check_restored(rules: RulesEngine, position: Any, before: Any) -> None:
    after = rules.snapshot(position)
    if after != before:
        raise SearchInvariantError(
            f"Position changed during search: {before!r} -> {after!r}"
        )


def _alphabeta(
    position: Any,
    depth: int,
    alpha: int,
    beta: int,
    maximizing: bool,
    evaluator: Evaluator,
    rules: RulesEngine,
    stats: SearchStats,
    prune: bool,
) -> int:
    stats.nodes += 1

    # Base case: leaf node or game over
    if depth == 0 or rules.is_game_over(position):
        return evaluator.evaluate(position)

    direction = Direction.for_side(maximizing)
    best = direction.sentinel

    for move in rules.legal_moves(position):
        rules.apply(position, move)
        value = _alphabeta(
            position,
            depth - 1,
            alpha,
            beta,
            not maximizing,
            evaluator,
            rules,
            stats,
            prune,
        )
        rules.undo(position)

        best = direction.pick(best, value)
        alpha, beta = direction.narrow(alpha, beta, best)

        if prune and beta <= alpha:
            stats.cutoffs += 1
            break

    return best


def search(
    position: Any,
    depth: int,
    alpha: int,
    beta: int,
    maximizing: bool,
    evaluator: Optional[Evaluator] = None,
    rules: Optional[RulesEngine] = None,
    stats: Optional[SearchStats] = None,
    prune: bool = True,
) -> int:
    """
    Minimax search with alpha-beta pruning.

    Recursively explores the game tree, assuming both players play
    optimally, and returns the value of the best line found.

    Args:
        position: Position handle (chess.Board for the default rules)
        depth: Remaining search depth in plies (non-negative)
        alpha: Lower bound of the window (best score for maximizer)
        beta: Upper bound of the window (best score for minimizer)
        maximizing: True if the side to move maximizes the score
        evaluator: Position evaluator (default: MaterialEvaluator)
        rules: Rules engine (default: ChessRules)
        stats: Optional counters, updated in place
        prune: Disable to walk the full tree

    Returns:
        int: Value of the position in centipawns, White's perspective

    Raises:
        ValueError: If depth is negative or not an integer
        TypeError: If the rules engine rejects the position handle
        SearchInvariantError: If the position is not restored

    Algorithm:
        1. depth = 0 or game over → evaluate position
        2. For each legal move, in generator order:
            a. Make move
            b. Recursively search (depth - 1, roles flipped)
            c. Undo move
            d. Fold into best, narrow alpha (max) or beta (min)
            e. Prune if beta <= alpha
        3. Return best
    """
    evaluator = evaluator if evaluator is not None else _DEFAULT_EVALUATOR
    rules = rules if rules is not None else _DEFAULT_RULES
    stats = stats if stats is not None else SearchStats()

    _check_depth(depth)
    rules.validate_position(position)

    before = rules.snapshot(position)
    value = _alphabeta(
        position, depth, alpha, beta, maximizing, evaluator, rules, stats, prune
    )
    _check_restored(rules, position, before)
    return value


def full_minimax(
    position: Any,
    depth: int,
    maximizing: bool,
    evaluator: Optional[Evaluator] = None,
    rules: Optional[RulesEngine] = None,
    stats: Optional[SearchStats] = None,
) -> int:
    """
    Plain minimax over the full window, without pruning.

    Reference implementation for checking search(); visits every node.
    """
    return search(
        position,
        depth,
        -WINDOW_BOUND,
        WINDOW_BOUND,
        maximizing,
        evaluator=evaluator,
        rules=rules,
        stats=stats,
        prune=False,
    )


def find_best_move(
    position: Any,
    depth: int,
    maximizing_side: Optional[bool] = None,
    evaluator: Optional[Evaluator] = None,
    rules: Optional[RulesEngine] = None,
    prune: bool = True,
    rng: Optional[random.Random] = None,
) -> SearchResult:
    """
    Find the best move in the current position.

    Every root move is searched with the full window (-WINDOW_BOUND,
    WINDOW_BOUND); the root itself does not narrow it between moves.
    A move replaces the incumbent only if strictly better, so the first
    move reaching the extremal value wins.

    If no move improves on the sentinel a move is chosen uniformly at
    random from the legal moves instead of returning None.

    Args:
        position: Position handle (chess.Board for the default rules)
        depth: Search depth in plies (non-negative). Root moves are
            searched at max(depth - 1, 0)
        maximizing_side: True to maximize (White), False to minimize
            (Black); None uses the side to move
        evaluator: Position evaluator (default: MaterialEvaluator)
        rules: Rules engine (default: ChessRules)
        prune: Use alpha-beta pruning
        rng: Random source for the fallback (default: module random)

    Returns:
        SearchResult with the chosen move (None if there are no legal moves)

    Raises:
        ValueError: If depth is negative or not an integer
        TypeError: If the rules engine rejects the position handle
        SearchInvariantError: If the position is not restored
    """
    evaluator = evaluator if evaluator is not None else _DEFAULT_EVALUATOR
    rules = rules if rules is not None else _DEFAULT_RULES

    _check_depth(depth)
    rules.validate_position(position)

    if maximizing_side is None:
        maximizing_side = rules.side_to_move(position) == chess.WHITE

    legal_moves = rules.legal_moves(position)
    if not legal_moves:
        logger.info("No legal moves available")
        return SearchResult(move=None, score=None, depth=depth)

    direction = Direction.for_side(maximizing_side)
    best_move = None
    best_score = direction.sentinel
    child_depth = max(depth - 1, 0)

    stats = SearchStats()
    scores = []
    before = rules.snapshot(position)

    # Search each move
    for move in legal_moves:
        rules.apply(position, move)
        score = _alphabeta(
            position,
            child_depth,
            -WINDOW_BOUND,
            WINDOW_BOUND,
            not maximizing_side,
            evaluator,
            rules,
            stats,
            prune,
        )
        rules.undo(position)

        scores.append(score)
        logger.debug(f"Move: {move}, Score: {score}")

        if direction.improves(score, best_score):
            best_score = score
            best_move = move

    _check_restored(rules, position, before)

    fallback_used = False
    if best_move is None:
        choose = rng.choice if rng is not None else random.choice
        index = choose(range(len(legal_moves)))
        best_move = legal_moves[index]
        best_score = scores[index]
        fallback_used = True
        logger.warning(
            f"No move improved on {direction.sentinel}; "
            f"picked {best_move} at random from {len(legal_moves)} moves"
        )

    logger.info(
        f"Search complete: depth={depth}, best_move={best_move}, "
        f"score={best_score}, nodes={stats.nodes}, cutoffs={stats.cutoffs}"
    )

    return SearchResult(
        move=best_move,
        score=best_score,
        depth=depth,
        nodes=stats.nodes,
        cutoffs=stats.cutoffs,
        fallback_used=fallback_used,
        scores=scores,
    )


def best_move(
    position: Any,
    depth: int,
    maximizing_side: Optional[bool] = None,
    evaluator: Optional[Evaluator] = None,
    rules: Optional[RulesEngine] = None,
    rng: Optional[random.Random] = None,
) -> Optional[chess.Move]:
    """
    Move chosen by find_best_move(), or None if there are no legal moves.
    """
    result = find_best_move(
        position,
        depth,
        maximizing_side,
        evaluator=evaluator,
        rules=rules,
        rng=rng,
    )
    return result.move
