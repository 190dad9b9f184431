"""
Unit Tests for the Tactical Position Suite
"""

import chess
import pytest
from openclaw.evaluation import MaterialEvaluator
from openclaw.utils import TACTICS_POSITIONS, SuitePosition, evaluate_position, run_suite


class TestSuitePositions:
    """Sanity checks on the suite data."""

    @pytest.mark.parametrize("position", TACTICS_POSITIONS, ids=lambda p: p.id)
    def test_expected_moves_are_legal(self, position):
        board = chess.Board(position.fen)

        assert board.is_valid()
        for uci in position.best_moves:
            assert chess.Move.from_uci(uci) in board.legal_moves


class TestRunSuite:
    """Tests for the suite runner."""

    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_all_positions_solved(self, depth):
        result = run_suite(MaterialEvaluator(), depth=depth)

        assert result['score'] == result['total'] == len(TACTICS_POSITIONS)
        assert result['percentage'] == 100

    def test_pruned_and_unpruned_agree(self):
        result = run_suite(depth=2, compare_unpruned=True)

        for r in result['results']:
            assert r.agrees, f"{r.position.id}: pruned and unpruned scores differ"
            assert r.nodes_searched <= r.unpruned_nodes

    def test_empty_suite(self):
        result = run_suite(positions=[])

        assert result['total'] == 0
        assert result['percentage'] == 0
        assert result['avg_time'] == 0


class TestEvaluatePosition:
    def test_wrong_expectation_reported(self):
        position = SuitePosition(
            fen="4k3/8/8/3q4/8/4N3/8/4K3 w - - 0 1",
            best_moves=["e1d1"],
            id="X.01",
        )

        result = evaluate_position(position, depth=1)

        assert not result.correct
        assert result.found_move == "e3d5"
        assert result.score == 320
        assert result.agrees is None

    def test_no_legal_moves(self):
        position = SuitePosition(fen="k7/2Q5/1K6/8/8/8/8/8 b - - 0 1", best_moves=[])

        result = evaluate_position(position, depth=2)

        assert result.found_move == ""
        assert result.score is None
        assert not result.correct

    def test_verbose_output(self, capsys):
        evaluate_position(TACTICS_POSITIONS[0], depth=1, compare_unpruned=True, verbose=True)

        output = capsys.readouterr().out
        assert TACTICS_POSITIONS[0].id in output
        assert "CORRECT" in output
