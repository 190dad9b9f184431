"""
Tactical Position Suite

A handful of positions with a single materially winning move. A
material-only engine finds each of them at depth 1 and must keep finding
them as the depth grows; running them with and without pruning also checks
that both searches agree.

Evaluation Metrics:
    - Correct Moves: Positions where the engine found the expected move
    - Nodes Searched: With and without pruning
    - Agreement: Pruned and unpruned scores are identical
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import chess

from openclaw.evaluation.base import Evaluator
from openclaw.rules.base import RulesEngine
from openclaw.search.minimax import find_best_move


@dataclass
class SuitePosition:
    """
    A position with expected best move(s).

    Attributes:
        fen: Board position in FEN notation
        best_moves: Acceptable best moves (UCI format)
        description: Human-readable description of the position
        id: Position identifier
    """
    fen: str
    best_moves: List[str]
    description: str = ""
    id: str = ""


@dataclass
class SuiteResult:
    """
    Result of searching a single suite position.

    Attributes:
        position: The suite position
        found_move: Move the engine found (UCI format, "" if none)
        score: Score of the found move
        correct: Whether the engine found a best move
        time_taken: Search time (seconds)
        nodes_searched: Nodes visited with pruning
        unpruned_nodes: Nodes visited without pruning (0 if not compared)
        agrees: Pruned and unpruned scores match (None if not compared)
        depth: Search depth used
    """
    position: SuitePosition
    found_move: str
    score: Optional[int]
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    unpruned_nodes: int = 0
    agrees: Optional[bool] = None
    depth: int = 0


TACTICS_POSITIONS = [
    SuitePosition(
        id="TC.01",
        fen="3r2k1/5ppp/8/8/8/8/8/1K1R4 w - - 0 1",
        best_moves=["d1d8"],
        description="White mates on the back rank with Rxd8#",
    ),
    SuitePosition(
        id="TC.02",
        fen="1k1r4/8/8/8/8/8/5PPP/3R2K1 b - - 0 1",
        best_moves=["d8d1"],
        description="Black mates on the back rank with Rxd1#",
    ),
    SuitePosition(
        id="TC.03",
        fen="4k3/8/8/3q4/8/4N3/8/4K3 w - - 0 1",
        best_moves=["e3d5"],
        description="White wins the undefended queen with Nxd5",
    ),
    SuitePosition(
        id="TC.04",
        fen="4k3/8/8/8/3Q4/1n6/8/4K3 b - - 0 1",
        best_moves=["b3d4"],
        description="Black wins the undefended queen with Nxd4",
    ),
    SuitePosition(
        id="TC.05",
        fen="r6k/1P6/8/8/8/8/8/7K w - - 0 1",
        best_moves=["b7a8q"],
        description="White captures the rook and promotes to a queen",
    ),
]


def evaluate_position(
    position: SuitePosition,
    depth: int,
    evaluator: Optional[Evaluator] = None,
    rules: Optional[RulesEngine] = None,
    compare_unpruned: bool = False,
    verbose: bool = False,
) -> SuiteResult:
    """
    Search a single suite position.

    Args:
        position: Suite position to search
        depth: Search depth
        evaluator: Position evaluator (default: MaterialEvaluator)
        rules: Rules engine (default: ChessRules)
        compare_unpruned: Also run the unpruned search and compare scores
        verbose: If True, print detailed output

    Returns:
        SuiteResult with the engine's move and whether it was correct
    """
    board = chess.Board(position.fen)
    maximizing = board.turn == chess.WHITE

    if verbose:
        print(f"\nTesting {position.id}: {position.description}")
        print(f"FEN: {position.fen}")
        print(f"Expected moves: {position.best_moves}")

    start_time = time.time()
    result = find_best_move(board, depth, maximizing, evaluator=evaluator, rules=rules)
    time_taken = time.time() - start_time

    found_move = result.move.uci() if result.move else ""
    correct = found_move in position.best_moves

    unpruned_nodes = 0
    agrees = None
    if compare_unpruned:
        reference = find_best_move(
            board, depth, maximizing, evaluator=evaluator, rules=rules, prune=False
        )
        unpruned_nodes = reference.nodes
        agrees = reference.score == result.score

    if verbose:
        print(f"Engine found: {found_move} (score: {result.score})")
        print(f"Nodes searched: {result.nodes:,}")
        if compare_unpruned:
            print(f"Unpruned nodes: {unpruned_nodes:,} (scores agree: {agrees})")
        print(f"Time: {time_taken:.2f}s")
        print(f"Result: {'CORRECT' if correct else 'WRONG'}")

    return SuiteResult(
        position=position,
        found_move=found_move,
        score=result.score,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=result.nodes,
        unpruned_nodes=unpruned_nodes,
        agrees=agrees,
        depth=depth,
    )


def run_suite(
    evaluator: Optional[Evaluator] = None,
    depth: int = 2,
    positions: Optional[List[SuitePosition]] = None,
    rules: Optional[RulesEngine] = None,
    compare_unpruned: bool = False,
    verbose: bool = False,
) -> Dict[str, Any]:
    """
    Run a position suite.

    Args:
        evaluator: Position evaluator (default: MaterialEvaluator)
        depth: Search depth (default: 2)
        positions: Positions to run (default: TACTICS_POSITIONS)
        rules: Rules engine (default: ChessRules)
        compare_unpruned: Also run unpruned search on every position
        verbose: If True, print detailed results

    Returns:
        Dictionary with suite results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of SuiteResult objects
            - avg_time: Average time per position
    """
    positions = TACTICS_POSITIONS if positions is None else positions

    results = [
        evaluate_position(
            position,
            depth,
            evaluator=evaluator,
            rules=rules,
            compare_unpruned=compare_unpruned,
            verbose=verbose,
        )
        for position in positions
    ]

    correct_count = sum(1 for r in results if r.correct)
    total_time = sum(r.time_taken for r in results)
    total = len(positions)

    return {
        'score': correct_count,
        'total': total,
        'percentage': (correct_count / total * 100) if total else 0,
        'results': results,
        'avg_time': total_time / total if total else 0,
    }
