"""Tests for the toolbar auto-hide state machine."""

from ontop.visibility import TOOLBAR_TIMEOUT, VisibilityController


def _started(scheduler, changes=None) -> VisibilityController:
    controller = VisibilityController(
        scheduler, on_change=changes.append if changes is not None else None
    )
    controller.start()
    return controller


def test_starts_visible_with_one_timer(scheduler) -> None:
    controller = _started(scheduler)
    assert controller.visible is True
    assert controller.hovered is False
    assert len(scheduler.pending) == 1
    assert scheduler.pending[0].deadline == TOOLBAR_TIMEOUT


def test_hides_after_timeout_without_activity(scheduler) -> None:
    changes = []
    controller = _started(scheduler, changes)

    scheduler.advance(3.5)
    assert controller.visible is True

    scheduler.advance(0.5)
    assert controller.visible is False
    assert changes == [False]
    assert scheduler.pending == []


def test_hover_keeps_toolbar_visible(scheduler) -> None:
    controller = _started(scheduler)
    controller.on_pointer_enter()

    for _ in range(3):
        scheduler.advance(TOOLBAR_TIMEOUT)
        assert controller.visible is True
        assert len(scheduler.pending) == 1

    controller.on_pointer_leave()
    scheduler.advance(TOOLBAR_TIMEOUT)
    assert controller.visible is False


def test_hover_is_read_when_timer_fires(scheduler) -> None:
    controller = _started(scheduler)
    scheduler.advance(1.0)
    controller.on_pointer_enter()
    scheduler.advance(1.0)
    controller.on_pointer_leave()

    scheduler.advance(2.0)
    assert controller.visible is False


def test_leave_does_not_hide_before_timer(scheduler) -> None:
    controller = _started(scheduler)
    controller.on_pointer_enter()
    scheduler.advance(TOOLBAR_TIMEOUT)
    controller.on_pointer_leave()

    assert controller.visible is True
    scheduler.advance(TOOLBAR_TIMEOUT)
    assert controller.visible is False


def test_pointer_move_shows_hidden_toolbar_and_arms_timer(scheduler) -> None:
    changes = []
    controller = _started(scheduler, changes)
    scheduler.advance(TOOLBAR_TIMEOUT)
    assert controller.visible is False

    controller.on_pointer_move()

    assert controller.visible is True
    assert changes == [False, True]
    assert len(scheduler.pending) == 1
    assert scheduler.pending[0].deadline == scheduler.now + TOOLBAR_TIMEOUT
    scheduler.advance(TOOLBAR_TIMEOUT)
    assert controller.visible is False


def test_pointer_move_while_visible_is_noop(scheduler) -> None:
    changes = []
    controller = _started(scheduler, changes)
    first_timer = scheduler.pending[0]

    scheduler.advance(2.0)
    controller.on_pointer_move()
    controller.on_pointer_move()

    assert changes == []
    assert scheduler.pending == [first_timer]
    scheduler.advance(2.0)
    assert controller.visible is False


def test_hidden_is_stable_without_pointer_move(scheduler) -> None:
    controller = _started(scheduler)
    scheduler.advance(TOOLBAR_TIMEOUT)
    controller.on_pointer_enter()

    scheduler.advance(TOOLBAR_TIMEOUT * 5)

    assert controller.visible is False
    assert scheduler.pending == []


def test_stop_cancels_pending_timer(scheduler) -> None:
    changes = []
    controller = _started(scheduler, changes)

    controller.stop()
    scheduler.advance(TOOLBAR_TIMEOUT * 2)

    assert controller.visible is True
    assert controller.timer_pending is False
    assert changes == []


def test_pointer_move_after_stop_is_ignored(scheduler) -> None:
    controller = _started(scheduler)
    scheduler.advance(TOOLBAR_TIMEOUT)
    controller.stop()

    controller.on_pointer_move()

    assert controller.visible is False
    assert scheduler.pending == []


def test_custom_timeout(scheduler) -> None:
    controller = VisibilityController(scheduler, timeout=1.5)
    controller.start()

    scheduler.advance(1.5)

    assert controller.visible is False
