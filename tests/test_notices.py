"""Tests for toast timing and form status."""

from datetime import datetime, timedelta, timezone

from app.core.notices import FormStatus, Toast

CREATED = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_default_duration_is_four_seconds():
    assert Toast(message="Saved").duration_ms == 4000


def test_toast_visible_until_duration_elapses():
    toast = Toast(message="Saved", kind="success", created_at=CREATED)
    assert toast.is_visible(CREATED)
    assert toast.is_visible(CREATED + timedelta(milliseconds=3999))
    assert not toast.is_visible(CREATED + timedelta(milliseconds=4000))
    assert not toast.is_visible(CREATED + timedelta(seconds=10))


def test_custom_duration():
    toast = Toast(message="Offline", kind="warning", duration_ms=1500, created_at=CREATED)
    assert toast.is_visible(CREATED + timedelta(milliseconds=1499))
    assert not toast.is_visible(CREATED + timedelta(milliseconds=1500))


def test_remaining_ms():
    toast = Toast(message="Saved", created_at=CREATED)
    assert toast.remaining_ms(CREATED) == 4000
    assert toast.remaining_ms(CREATED + timedelta(milliseconds=2500)) == 1500
    assert toast.remaining_ms(CREATED + timedelta(seconds=9)) == 0


def test_form_status_states():
    assert FormStatus.idle().state == "idle"
    assert FormStatus.busy().is_busy
    status = FormStatus.error("Failed to save your height. Please try again.")
    assert status.is_error
    assert not status.is_busy
    assert status.message.startswith("Failed to save")
