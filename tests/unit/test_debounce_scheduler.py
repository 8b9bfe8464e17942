"""
Unit tests for DebounceScheduler.

Uses a virtual clock so firing is fully deterministic.
"""

from src.domain.debounce import DebounceScheduler
from tests.fakes import VirtualTimer


class TestSchedule:
    def test_action_runs_after_delay(self, timer: VirtualTimer, scheduler: DebounceScheduler) -> None:
        fired: list[str] = []
        scheduler.schedule("login", 400, lambda: fired.append("x"))

        timer.advance(0.399)
        assert fired == []
        assert scheduler.pending("login")

        timer.advance(0.002)
        assert fired == ["x"]
        assert not scheduler.pending("login")

    def test_reschedule_restarts_delay_and_cancels_previous(
        self, timer: VirtualTimer, scheduler: DebounceScheduler
    ) -> None:
        fired: list[str] = []
        scheduler.schedule("login", 400, lambda: fired.append("first"))
        timer.advance(0.3)
        scheduler.schedule("login", 400, lambda: fired.append("second"))

        timer.advance(0.3)
        assert fired == []

        timer.advance(0.2)
        assert fired == ["second"]

    def test_burst_runs_once(self, timer: VirtualTimer, scheduler: DebounceScheduler) -> None:
        fired: list[int] = []
        for i in range(10):
            scheduler.schedule("login", 400, lambda i=i: fired.append(i))
            timer.advance(0.05)

        timer.advance(1)
        assert fired == [9]

    def test_at_most_one_pending_per_key(
        self, timer: VirtualTimer, scheduler: DebounceScheduler
    ) -> None:
        for _ in range(5):
            scheduler.schedule("login", 400, lambda: None)
        assert timer.live == 1

    def test_keys_are_independent(self, timer: VirtualTimer, scheduler: DebounceScheduler) -> None:
        fired: list[str] = []
        scheduler.schedule("a", 100, lambda: fired.append("a"))
        scheduler.schedule("b", 200, lambda: fired.append("b"))
        scheduler.schedule("a", 300, lambda: fired.append("a2"))

        timer.advance(1)
        assert fired == ["b", "a2"]

    def test_action_may_reschedule_same_key(
        self, timer: VirtualTimer, scheduler: DebounceScheduler
    ) -> None:
        fired: list[str] = []

        def again() -> None:
            fired.append("tick")
            if len(fired) < 3:
                scheduler.schedule("poll", 100, again)

        scheduler.schedule("poll", 100, again)
        timer.advance(1)
        assert fired == ["tick", "tick", "tick"]


class TestCancel:
    def test_cancel_prevents_action(self, timer: VirtualTimer, scheduler: DebounceScheduler) -> None:
        fired: list[str] = []
        scheduler.schedule("login", 400, lambda: fired.append("x"))

        assert scheduler.cancel("login") is True
        timer.advance(10)

        assert fired == []
        assert timer.live == 0

    def test_cancel_without_pending_returns_false(self, scheduler: DebounceScheduler) -> None:
        assert scheduler.cancel("login") is False

    def test_cancel_after_fire_returns_false(
        self, timer: VirtualTimer, scheduler: DebounceScheduler
    ) -> None:
        scheduler.schedule("login", 400, lambda: None)
        timer.advance(1)
        assert scheduler.cancel("login") is False

    def test_cancel_all(self, timer: VirtualTimer, scheduler: DebounceScheduler) -> None:
        fired: list[str] = []
        scheduler.schedule("a", 100, lambda: fired.append("a"))
        scheduler.schedule("b", 100, lambda: fired.append("b"))

        scheduler.cancel_all()
        timer.advance(1)

        assert fired == []
        assert not scheduler.pending("a")
        assert not scheduler.pending("b")
