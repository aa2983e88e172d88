"""Progress shared by every screen of a game session."""

from __future__ import annotations

from dataclasses import dataclass

BOSS_FLOOR_COUNT = 10


@dataclass
class GameState:
    """Dungeon depth, best result and the farm's bread tick."""

    boss_count: int = 1
    score: int = 1
    high_score: int = 0
    bread_count: int = 1

    def advance_floor(self) -> None:
        """Descend one floor after a won fight."""
        self.score += 1

    def record_high_score(self) -> None:
        """Keep the deepest floor reached and start the next run from zero."""
        if self.high_score < self.score:
            self.high_score = self.score
        self.score = 0

    def defeat_boss_step(self) -> None:
        """Count one more monster towards the boss encounter."""
        self.boss_count += 1

    def reset_after_death(self) -> None:
        """Restore the initial progress after the hero dies."""
        self.boss_count = 1
        self.score = 1
        self.high_score = 0
        self.bread_count = 1