"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for an Itadaki game session."""

    starting_cash: int = 2500

    # Bank salary: salary_base + floor(salary_percent% of net worth)
    salary_base: int = 500
    salary_percent: int = 10

    # Chance tile cash delta, inclusive on both ends
    chance_min: int = -150
    chance_max: int = 200

    die_faces: int = 6

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.chance_min > self.chance_max:
            raise ValueError(
                f"chance_min ({self.chance_min}) must not exceed chance_max ({self.chance_max})"
            )
        if self.die_faces < 1:
            raise ValueError(f"die_faces must be at least 1, got {self.die_faces}")
        if self.salary_percent < 0:
            raise ValueError(f"salary_percent must be non-negative, got {self.salary_percent}")

    def salary_for(self, net_worth: int) -> int:
        """Bank salary for a player with the given net worth (floored)."""
        return self.salary_base + (net_worth * self.salary_percent) // 100
