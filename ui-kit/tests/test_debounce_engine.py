# ui-kit/tests/test_debounce_engine.py

from typing import List

from uikit.debounce import DebounceEngine, bind_debounced_input


def test_burst_of_updates_emits_once_with_last_value(scheduler) -> None:
    """
    window=300ms で 50ms 間隔の update を 3 回 → 最後の update から 300ms 後に 1 回だけ emit。
    """
    emitted: List[str] = []
    binding = bind_debounced_input(300, emitted.append, scheduler=scheduler)

    binding.update("a")
    scheduler.advance_ms(50)
    binding.update("ab")
    scheduler.advance_ms(50)
    binding.update("abc")

    scheduler.advance_ms(299)
    assert emitted == []

    scheduler.advance_ms(2)
    assert emitted == ["abc"]
    assert binding.state.last_emitted_value == "abc"

    # その後いくら時間が経っても追加の emit はない
    scheduler.advance_ms(5000)
    assert emitted == ["abc"]


def test_only_one_pending_timer_at_a_time(scheduler) -> None:
    binding = bind_debounced_input(300, lambda v: None, scheduler=scheduler)

    for value in ("a", "ab", "abc", "abcd"):
        binding.update(value)
        assert len(scheduler.pending) == 1

    assert binding.has_pending is True
    assert binding.state.last_raw_value == "abcd"


def test_bindings_are_independent(scheduler) -> None:
    first: List[str] = []
    second: List[str] = []
    a = bind_debounced_input(100, first.append, scheduler=scheduler)
    b = bind_debounced_input(100, second.append, scheduler=scheduler)

    a.update("x")
    scheduler.advance_ms(150)

    assert first == ["x"]
    assert second == []

    b.update("y")
    scheduler.advance_ms(50)
    a.update("z")
    scheduler.advance_ms(60)

    assert second == ["y"]
    assert first == ["x"]

    scheduler.advance_ms(100)
    assert first == ["x", "z"]


def test_zero_window_emits_synchronously() -> None:
    """window=0 の場合は update() が戻る前に emit される（スケジューラ不要）。"""
    emitted: List[str] = []
    binding = bind_debounced_input(0, emitted.append)

    binding.update("x")

    assert emitted == ["x"]
    assert binding.has_pending is False


def test_negative_window_is_treated_as_zero() -> None:
    emitted: List[str] = []
    binding = DebounceEngine(-50, emitted.append)

    assert binding.window_ms == 0
    binding.update("now")
    assert emitted == ["now"]


def test_teardown_cancels_pending_emission(scheduler) -> None:
    emitted: List[str] = []
    binding = bind_debounced_input(300, emitted.append, scheduler=scheduler)

    binding.update("pending")
    timer = scheduler.pending[0]

    binding.teardown()
    scheduler.advance_ms(1000)

    assert emitted == []
    assert timer.cancelled is True
    assert binding.is_torn_down is True


def test_update_and_flush_after_teardown_are_noops(scheduler) -> None:
    emitted: List[str] = []
    binding = bind_debounced_input(300, emitted.append, scheduler=scheduler)
    binding.teardown()

    binding.update("late")
    binding.flush()
    binding.teardown()

    assert scheduler.timers == []
    assert emitted == []


def test_flush_emits_immediately_and_cancels_timer(scheduler) -> None:
    emitted: List[str] = []
    binding = bind_debounced_input(300, emitted.append, scheduler=scheduler)

    binding.update("abc")
    timer = scheduler.pending[0]
    binding.flush()

    assert emitted == ["abc"]
    assert timer.cancelled is True

    scheduler.advance_ms(1000)
    assert emitted == ["abc"]


def test_flush_without_pending_emission_does_nothing(scheduler) -> None:
    emitted: List[str] = []
    binding = bind_debounced_input(300, emitted.append, scheduler=scheduler)

    binding.flush()
    binding.update("a")
    scheduler.advance_ms(300)
    binding.flush()

    assert emitted == ["a"]


def test_distinct_suppresses_repeated_value(scheduler) -> None:
    emitted: List[str] = []
    binding = bind_debounced_input(100, emitted.append, scheduler=scheduler, distinct=True)

    binding.update("same")
    scheduler.advance_ms(100)
    binding.update("same")
    scheduler.advance_ms(100)
    binding.update("other")
    scheduler.advance_ms(100)

    assert emitted == ["same", "other"]


def test_repeated_value_is_emitted_by_default(scheduler) -> None:
    emitted: List[str] = []
    binding = bind_debounced_input(100, emitted.append, scheduler=scheduler)

    binding.update("same")
    scheduler.advance_ms(100)
    binding.update("same")
    scheduler.advance_ms(100)

    assert emitted == ["same", "same"]


def test_window_defaults_to_configured_value(scheduler, monkeypatch) -> None:
    monkeypatch.setenv("UIKIT_DEBOUNCE_WINDOW_MS", "120")
    emitted: List[str] = []
    binding = bind_debounced_input(None, emitted.append, scheduler=scheduler)

    assert binding.window_ms == 120
    binding.update("v")
    scheduler.advance_ms(119)
    assert emitted == []
    scheduler.advance_ms(1)
    assert emitted == ["v"]
