"""Life stage definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LifeStage:
    """A contiguous slice of the game timeline. Times in milliseconds."""

    id: str
    name: str
    duration: float
    difficulty: int  # 1-5
    start_time: float

    @property
    def end_time(self) -> float:
        return self.start_time + self.duration

    def contains(self, t: float) -> bool:
        return self.start_time <= t < self.end_time


def build_stages(specs: list[tuple[str, str, float, int]]) -> tuple[LifeStage, ...]:
    """Lay out ``(id, name, duration, difficulty)`` specs back to back from t=0."""
    stages: list[LifeStage] = []
    start = 0.0
    for stage_id, name, duration, difficulty in specs:
        stages.append(
            LifeStage(
                id=stage_id,
                name=name,
                duration=duration,
                difficulty=difficulty,
                start_time=start,
            )
        )
        start += duration
    return tuple(stages)


# 100 seconds in total.
DEFAULT_STAGES: tuple[LifeStage, ...] = build_stages([
    ("baby", "Infancy", 15000, 1),
    ("child", "Childhood", 20000, 2),
    ("teen", "Adolescence", 20000, 3),
    ("adult", "Adulthood", 30000, 4),
    ("elder", "Old Age", 15000, 3),
])
