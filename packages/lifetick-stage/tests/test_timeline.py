"""Tests for lifetick_stage.timeline - StageTimeline."""
from __future__ import annotations

import json

import pytest

from lifetick.types import ConfigError, SnapshotError

from lifetick_stage.timeline import StageTimeline
from lifetick_stage.types import LifeStage, build_stages


def _short_stages() -> tuple[LifeStage, ...]:
    return build_stages([("a", "First", 100, 1), ("b", "Second", 200, 2), ("c", "Third", 100, 5)])


class TestConstruction:
    def test_default_total_time(self) -> None:
        assert StageTimeline().total_time == 100000

    def test_initially_idle(self) -> None:
        t = StageTimeline()
        assert not t.is_active
        assert not t.is_complete
        assert t.current_stage is None
        assert t.game_time == 0

    def test_empty_stage_list_rejected(self) -> None:
        with pytest.raises(ConfigError):
            StageTimeline([])

    def test_gap_rejected(self) -> None:
        stages = [
            LifeStage("a", "A", 100, 1, 0),
            LifeStage("b", "B", 100, 1, 150),
        ]
        with pytest.raises(ConfigError):
            StageTimeline(stages)

    def test_overlap_rejected(self) -> None:
        stages = [
            LifeStage("a", "A", 100, 1, 0),
            LifeStage("b", "B", 100, 1, 50),
        ]
        with pytest.raises(ConfigError):
            StageTimeline(stages)

    def test_unsorted_rejected(self) -> None:
        stages = [
            LifeStage("b", "B", 100, 1, 100),
            LifeStage("a", "A", 100, 1, 0),
        ]
        with pytest.raises(ConfigError):
            StageTimeline(stages)

    def test_bad_difficulty_rejected(self) -> None:
        with pytest.raises(ConfigError):
            StageTimeline([LifeStage("a", "A", 100, 6, 0)])

    def test_non_positive_duration_rejected(self) -> None:
        with pytest.raises(ConfigError):
            StageTimeline([LifeStage("a", "A", 0, 1, 0)])

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ConfigError):
            StageTimeline([LifeStage("a", "A", 100, 1, 0), LifeStage("a", "A2", 100, 1, 100)])


class TestLifecycle:
    def test_start_enters_first_stage(self) -> None:
        t = StageTimeline()
        assert t.start_game() is True
        assert t.is_active
        assert t.current_stage is not None
        assert t.current_stage.id == "baby"

    def test_start_while_active_is_noop(self) -> None:
        t = StageTimeline()
        t.start_game()
        t.update(5000)
        assert t.start_game() is False
        assert t.game_time == 5000

    def test_update_before_start_is_noop(self) -> None:
        t = StageTimeline()
        t.update(16000)
        assert t.game_time == 0
        assert t.current_stage is None
        assert not t.is_active

    def test_single_update_reaches_child(self) -> None:
        t = StageTimeline()
        t.start_game()
        t.update(16000)
        assert t.current_stage is not None
        assert t.current_stage.id == "child"

    def test_stage_boundary_belongs_to_next_stage(self) -> None:
        t = StageTimeline()
        t.start_game()
        t.update(15000)
        assert t.current_stage.id == "child"  # type: ignore[union-attr]

    def test_completes_at_total_time(self) -> None:
        t = StageTimeline(_short_stages())
        t.start_game()
        t.update(399)
        assert t.is_active
        t.update(1)
        assert t.is_complete
        assert not t.is_active
        assert t.current_stage.id == "c"  # type: ignore[union-attr]

    def test_updates_after_completion_are_noops(self) -> None:
        t = StageTimeline(_short_stages())
        t.start_game()
        t.update(500)
        t.update(500)
        assert t.game_time == 500
        assert t.is_complete

    def test_restart_from_complete(self) -> None:
        t = StageTimeline(_short_stages())
        t.start_game()
        t.update(1000)
        assert t.start_game() is True
        assert t.is_active
        assert not t.is_complete
        assert t.game_time == 0
        assert t.current_stage.id == "a"  # type: ignore[union-attr]

    def test_reset(self) -> None:
        t = StageTimeline()
        t.start_game()
        t.update(20000)
        t.reset_game()
        assert not t.is_active
        assert not t.is_complete
        assert t.game_time == 0
        assert t.current_stage is None

    def test_negative_dt_ignored(self) -> None:
        t = StageTimeline()
        t.start_game()
        t.update(1000)
        t.update(-500)
        assert t.game_time == 1000


class TestListeners:
    def test_transition_hook_receives_previous_and_new(self) -> None:
        t = StageTimeline(_short_stages())
        log: list[tuple[str | None, str]] = []
        t.on_stage_transition(lambda prev, new: log.append((prev.id if prev else None, new.id)))
        t.start_game()
        t.update(150)
        t.update(200)
        assert log == [("a", "b"), ("b", "c")]

    def test_jumping_multiple_stages_fires_once(self) -> None:
        t = StageTimeline(_short_stages())
        log: list[str] = []
        t.on_stage_transition(lambda prev, new: log.append(new.id))
        t.start_game()
        t.update(350)
        assert log == ["c"]

    def test_start_and_end_hooks(self) -> None:
        t = StageTimeline(_short_stages())
        log: list[str] = []
        t.on_game_start(lambda tl: log.append("start"))
        t.on_game_end(lambda tl: log.append(f"end@{tl.game_time:.0f}"))
        t.start_game()
        t.update(1000)
        t.update(1000)
        assert log == ["start", "end@1000"]

    def test_failing_transition_hook_does_not_stall_game(self, caplog) -> None:
        t = StageTimeline()

        def broken(prev, new) -> None:
            raise RuntimeError("renderer gone")

        ends: list[float] = []
        t.on_stage_transition(broken)
        t.on_game_end(lambda tl: ends.append(tl.game_time))
        t.start_game()
        with caplog.at_level("ERROR", logger="lifetick_stage.timeline"):
            t.update(100000)
        assert t.is_complete
        assert not t.is_active
        assert ends == [100000.0]
        assert "Timeline hook" in caplog.text

    def test_failing_start_and_end_hooks_are_contained(self) -> None:
        t = StageTimeline(_short_stages())

        def broken(tl) -> None:
            raise ValueError("listener bug")

        seen: list[str] = []
        t.on_game_start(broken)
        t.on_game_start(lambda tl: seen.append("start"))
        t.on_game_end(broken)
        assert t.start_game() is True
        assert t.is_active
        t.update(400)
        assert t.is_complete
        assert seen == ["start"]


class TestQueries:
    def test_progress_before_start(self) -> None:
        t = StageTimeline()
        assert t.stage_progress() == 0.0
        assert t.game_progress() == 0.0

    def test_stage_progress(self) -> None:
        t = StageTimeline()
        t.start_game()
        t.update(25000)
        assert t.stage_progress() == pytest.approx(0.5)

    def test_game_progress_clamped(self) -> None:
        t = StageTimeline(_short_stages())
        t.start_game()
        t.update(10000)
        assert t.game_progress() == 1.0
        assert t.stage_progress() == 1.0

    def test_progress_is_monotonic(self) -> None:
        t = StageTimeline()
        t.start_game()
        last_game = 0.0
        last_stage_time = 0.0
        for _ in range(120):
            t.update(1000)
            assert 0.0 <= t.game_progress() <= 1.0
            assert 0.0 <= t.stage_progress() <= 1.0
            assert t.game_progress() >= last_game
            last_game = t.game_progress()
            assert t.game_time >= last_stage_time
            last_stage_time = t.game_time

    def test_stage_progress_monotonic_within_stage(self) -> None:
        t = StageTimeline()
        t.start_game()
        values = []
        for _ in range(14):
            t.update(1000)
            values.append(t.stage_progress())
        assert values == sorted(values)

    def test_time_left_and_elapsed_in_seconds(self) -> None:
        t = StageTimeline()
        t.start_game()
        t.update(40000)
        assert t.time_left() == pytest.approx(60.0)
        assert t.elapsed_time() == pytest.approx(40.0)

    def test_time_left_never_negative(self) -> None:
        t = StageTimeline(_short_stages())
        t.start_game()
        t.update(5000)
        assert t.time_left() == 0.0

    def test_stage_by_id(self) -> None:
        t = StageTimeline()
        stage = t.stage_by_id("adult")
        assert stage is not None
        assert stage.start_time == 55000
        assert t.stage_by_id("ghost") is None

    def test_stage_for_time_defaults_to_first(self) -> None:
        t = StageTimeline()
        assert t.stage_for_time(-5).id == "baby"
        assert t.stage_for_time(99999).id == "elder"
        assert t.stage_for_time(250000).id == "elder"

    def test_all_stages_is_a_copy(self) -> None:
        t = StageTimeline()
        stages = t.all_stages()
        stages.clear()
        assert len(t.all_stages()) == 5


class TestSnapshot:
    def test_round_trip(self) -> None:
        t = StageTimeline()
        t.start_game()
        t.update(42000)
        data = json.loads(json.dumps(t.snapshot()))

        other = StageTimeline()
        other.restore(data)
        assert other.game_time == 42000
        assert other.current_stage.id == "teen"  # type: ignore[union-attr]
        assert other.is_active

    def test_unknown_stage_rejected(self) -> None:
        t = StageTimeline()
        with pytest.raises(SnapshotError):
            t.restore({"game_time": 0, "current_stage": "ghost", "is_active": True, "is_complete": False})

    def test_missing_field_rejected(self) -> None:
        t = StageTimeline()
        with pytest.raises(SnapshotError):
            t.restore({"game_time": 0})

    def test_active_and_complete_rejected(self) -> None:
        t = StageTimeline()
        with pytest.raises(SnapshotError):
            t.restore({"game_time": 0, "current_stage": None, "is_active": True, "is_complete": True})
