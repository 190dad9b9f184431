"""
Engine configuration.
"""

from dataclasses import dataclass
from typing import Optional

# Depth the opponent plays at unless configured otherwise.
DEFAULT_DEPTH = 3


@dataclass
class EngineConfig:
    """Configuration for the OpenClaw opponent.

    Groups the search settings used by GameSession and the tools scripts.
    """

    depth: int = DEFAULT_DEPTH
    """Search depth in plies"""

    maximizing: bool = False
    """True if the engine plays White (maximizes), False for Black"""

    prune: bool = True
    """Use alpha-beta pruning (False runs the full minimax reference)"""

    claim_draw: bool = False
    """Treat claimable draws (threefold repetition, fifty moves) as game over"""

    seed: Optional[int] = None
    """Seed for the random fallback move (None for nondeterministic)"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise ValueError(f"depth must be an integer, got {self.depth!r}")

        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")

    @property
    def side_name(self) -> str:
        return "white" if self.maximizing else "black"

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(depth={self.depth}, side={self.side_name}, "
            f"prune={self.prune}, claim_draw={self.claim_draw}, seed={self.seed})"
        )
