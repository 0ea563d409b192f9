"""Weights and thresholds of the financial health score."""

from dataclasses import dataclass
from decimal import Decimal

LEVEL_GOOD = "good"
LEVEL_FAIR = "fair"
LEVEL_NEEDS_IMPROVEMENT = "needs improvement"

LEVEL_COLORS = {
    LEVEL_GOOD: "green",
    LEVEL_FAIR: "yellow",
    LEVEL_NEEDS_IMPROVEMENT: "red",
}


@dataclass(frozen=True)
class HealthScorePolicy:
    """Heuristic bands used by the health score.

    Emergency fund bands are expressed in months of average expenses,
    concentration and stock exposure bands in percent.
    """

    emergency_min_months: Decimal = Decimal("3")
    emergency_max_months: Decimal = Decimal("6")
    emergency_floor_months: Decimal = Decimal("1")
    emergency_adequate_points: int = 40
    emergency_excess_points: int = 25
    emergency_low_points: int = 15
    emergency_critical_points: int = 5
    emergency_no_data_points: int = 10

    concentration_high_pct: Decimal = Decimal("50")
    concentration_moderate_pct: Decimal = Decimal("30")
    concentration_high_points: int = 5
    concentration_moderate_points: int = 15
    concentration_diversified_points: int = 30

    stock_high_pct: Decimal = Decimal("60")
    stock_moderate_pct: Decimal = Decimal("35")
    stock_high_points: int = 5
    stock_moderate_points: int = 15
    stock_controlled_points: int = 30

    good_threshold: int = 80
    fair_threshold: int = 50

    def level_for(self, score: int) -> str:
        """Map a score to its level name."""
        if score >= self.good_threshold:
            return LEVEL_GOOD
        if score >= self.fair_threshold:
            return LEVEL_FAIR
        return LEVEL_NEEDS_IMPROVEMENT


DEFAULT_HEALTH_POLICY = HealthScorePolicy()


__all__ = [
    "DEFAULT_HEALTH_POLICY",
    "HealthScorePolicy",
    "LEVEL_COLORS",
    "LEVEL_FAIR",
    "LEVEL_GOOD",
    "LEVEL_NEEDS_IMPROVEMENT",
]
