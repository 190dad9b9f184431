"""
Utilities Module

Position suites for checking and benchmarking the engine.

Key Components:
    - TACTICS_POSITIONS: Positions with a single materially winning move
    - evaluate_position: Search one suite position
    - run_suite: Search a whole suite, optionally comparing against the
      unpruned search
"""

from openclaw.utils.suites import (
    TACTICS_POSITIONS,
    SuitePosition,
    SuiteResult,
    evaluate_position,
    run_suite,
)

__all__ = [
    'TACTICS_POSITIONS',
    'SuitePosition',
    'SuiteResult',
    'evaluate_position',
    'run_suite',
]
