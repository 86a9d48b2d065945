from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    """Scoring table and the speed curve driven by total lines cleared."""

    line_clear_scores: tuple[int, int, int, int, int] = (0, 100, 300, 500, 800)
    lines_per_level: int = 10
    base_interval_ms: int = 1000
    interval_step_ms: int = 100
    min_interval_ms: int = 100

    def __post_init__(self) -> None:
        if len(self.line_clear_scores) != 5:
            raise ValueError("line_clear_scores needs one entry for 0 through 4 lines")
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")
        if self.min_interval_ms <= 0:
            raise ValueError("min_interval_ms must be positive")

    def score_for_lines(self, lines: int, level: int = 1) -> int:
        if lines <= 0:
            return 0
        # A single lock can't clear more than four rows; cap for oversized grids
        return self.line_clear_scores[min(lines, 4)] * level

    def level_for_lines(self, total_lines: int) -> int:
        return total_lines // self.lines_per_level + 1

    def drop_interval_for_level(self, level: int) -> int:
        return max(self.min_interval_ms, self.base_interval_ms - (level - 1) * self.interval_step_ms)
