"""Per-difficulty search and evaluation settings.

Each tier is an immutable :class:`TierConfig`. Callers that need different
budgets (tests, analysis tools) derive one with :func:`dataclasses.replace`
and pass it wherever a difficulty name is accepted.
"""

from dataclasses import dataclass
from typing import Optional, Union

EASY, MEDIUM, HARD = "easy", "medium", "hard"


@dataclass(frozen=True)
class Weights:
    mobility: float
    discs: float
    corners: float
    positional: float
    frontier: float
    stability: float


@dataclass(frozen=True)
class TierConfig:
    depth: int              # frontier search depth limit, in plies from the root
    max_nodes: int          # popped-node budget for frontier search
    time_budget_s: Optional[float]  # seconds; None means no clock limit
    weights: Weights
    endgame_threshold: int  # exact solver when empties <= this; 0 disables it
    jitter: float = 0.0     # easy tier only: random spread on frontier ordering


TIERS = {
    EASY: TierConfig(depth=2, max_nodes=2_000, time_budget_s=0.06,
                     weights=Weights(mobility=2, discs=1, corners=15, positional=0.5, frontier=0.5, stability=0.5),
                     endgame_threshold=0, jitter=0.6),
    MEDIUM: TierConfig(depth=5, max_nodes=20_000, time_budget_s=0.22,
                       weights=Weights(mobility=3, discs=1, corners=25, positional=2, frontier=1.5, stability=1.5),
                       endgame_threshold=8),
    HARD: TierConfig(depth=8, max_nodes=200_000, time_budget_s=0.9,
                     weights=Weights(mobility=4, discs=1, corners=45, positional=7, frontier=3, stability=4),
                     endgame_threshold=12),
}


def get_config(difficulty: Union[str, TierConfig]) -> TierConfig:
    if isinstance(difficulty, TierConfig):
        return difficulty
    try:
        return TIERS[str(difficulty).lower()]
    except KeyError:
        raise ValueError(f"unknown difficulty {difficulty!r}; expected one of {sorted(TIERS)}") from None
