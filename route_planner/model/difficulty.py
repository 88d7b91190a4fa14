"""Difficulty levels for general and hiking route classification.

Both enums are ordered: `rank` increases with severity, so callers can
compare levels without relying on string order.
"""

from enum import Enum

from route_planner.constants import DifficultyConfig, HikingConfig


class Difficulty(str, Enum):
    """General difficulty used for route comparison (driving/biking/walking)."""

    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"
    EXTREME = "extreme"

    @property
    def rank(self) -> int:
        return DifficultyConfig.LEVELS.index(self.value)


class HikingDifficulty(str, Enum):
    """Hiking-specific difficulty."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def rank(self) -> int:
        return HikingConfig.LEVELS.index(self.value)


assert [d.value for d in Difficulty] == DifficultyConfig.LEVELS
assert [d.value for d in HikingDifficulty] == HikingConfig.LEVELS
