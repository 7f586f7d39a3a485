"""Tests for the application notification centre."""

from __future__ import annotations

import pytest

from core.notifications import (
    Notification,
    NotificationCenter,
    NotificationLevel,
    NotificationStatus,
)


def test_track_operation_publishes_start_and_success() -> None:
    center = NotificationCenter()
    events: list[Notification] = []
    center.subscribe(events.append)

    with center.track_operation(
        "create note",
        start_message="Creating note…",
        success_message="Note created.",
        metadata={"title": "A"},
    ):
        pass

    assert [event.status for event in events] == [
        NotificationStatus.STARTED,
        NotificationStatus.SUCCEEDED,
    ]
    assert events[1].message == "Note created."
    assert events[1].level is NotificationLevel.SUCCESS
    assert events[1].metadata == {"title": "A"}
    assert events[0].task_id == events[1].task_id
    assert events[1].duration_ms is not None


def test_track_operation_failure_reraises_with_message() -> None:
    center = NotificationCenter()
    events: list[Notification] = []
    center.subscribe(events.append)

    with pytest.raises(RuntimeError, match="offline"):
        with center.track_operation(
            "load notes",
            start_message="Loading notes…",
            success_message="Notes loaded.",
        ):
            raise RuntimeError("offline")

    failure = events[-1]
    assert failure.status is NotificationStatus.FAILED
    assert failure.level is NotificationLevel.ERROR
    assert failure.message == "Unable to load notes: offline"
    assert center.failures() == (failure,)


def test_custom_failure_message_prefix() -> None:
    center = NotificationCenter()

    with pytest.raises(ValueError):
        with center.track_operation(
            "delete note",
            start_message="Deleting…",
            success_message="Deleted.",
            failure_message="Delete failed",
        ):
            raise ValueError("gone")

    assert center.failures()[0].message == "Delete failed: gone"


def test_subscription_can_be_closed() -> None:
    center = NotificationCenter()
    events: list[Notification] = []
    subscription = center.subscribe(events.append)
    subscription.close()
    subscription.close()

    with center.track_operation("load notes", start_message="Start", success_message="Done"):
        pass

    assert events == []
    assert len(center.history()) == 2


def test_broken_subscriber_does_not_block_others() -> None:
    center = NotificationCenter()
    received: list[Notification] = []

    def _broken(_: Notification) -> None:
        raise RuntimeError("listener failure")

    center.subscribe(_broken)
    center.subscribe(received.append)

    with center.track_operation("load notes", start_message="Start", success_message="Done"):
        pass

    assert len(received) == 2


def test_history_is_bounded() -> None:
    center = NotificationCenter(history_limit=3)

    for _ in range(3):
        with center.track_operation("load notes", start_message="Start", success_message="Done"):
            pass

    history = center.history()
    assert len(history) == 3
    assert history[-1].message == "Done"
    assert history[-1].to_dict()["status"] == "succeeded"
