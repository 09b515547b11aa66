"""Tests for lifetick_stage.types."""
from __future__ import annotations

import pytest

from lifetick_stage.types import DEFAULT_STAGES, LifeStage, build_stages


class TestLifeStage:
    def test_end_time(self) -> None:
        stage = LifeStage(id="teen", name="Adolescence", duration=20000, difficulty=3, start_time=35000)
        assert stage.end_time == 55000

    def test_contains_is_half_open(self) -> None:
        stage = LifeStage(id="baby", name="Infancy", duration=15000, difficulty=1, start_time=0)
        assert stage.contains(0)
        assert stage.contains(14999.9)
        assert not stage.contains(15000)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_STAGES[0].duration = 1  # type: ignore[misc]


class TestBuildStages:
    def test_back_to_back_layout(self) -> None:
        stages = build_stages([("a", "A", 100, 1), ("b", "B", 50, 2)])
        assert [(s.id, s.start_time) for s in stages] == [("a", 0.0), ("b", 100.0)]


class TestDefaultStages:
    def test_ids_in_order(self) -> None:
        assert [s.id for s in DEFAULT_STAGES] == ["baby", "child", "teen", "adult", "elder"]

    def test_total_is_one_hundred_seconds(self) -> None:
        assert sum(s.duration for s in DEFAULT_STAGES) == 100000

    def test_known_start_times(self) -> None:
        assert [s.start_time for s in DEFAULT_STAGES] == [0, 15000, 35000, 55000, 85000]
        assert [s.difficulty for s in DEFAULT_STAGES] == [1, 2, 3, 4, 3]

    def test_every_instant_in_exactly_one_stage(self) -> None:
        for t in range(0, 100000, 250):
            owners = [s.id for s in DEFAULT_STAGES if s.contains(t)]
            assert len(owners) == 1, t
