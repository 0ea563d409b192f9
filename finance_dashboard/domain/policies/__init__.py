"""Domain policies package."""

from .health_policy import (
    DEFAULT_HEALTH_POLICY,
    HealthScorePolicy,
    LEVEL_COLORS,
    LEVEL_FAIR,
    LEVEL_GOOD,
    LEVEL_NEEDS_IMPROVEMENT,
)

__all__ = [
    "DEFAULT_HEALTH_POLICY",
    "HealthScorePolicy",
    "LEVEL_COLORS",
    "LEVEL_FAIR",
    "LEVEL_GOOD",
    "LEVEL_NEEDS_IMPROVEMENT",
]
