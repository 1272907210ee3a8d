"""
Transient notices shown by the client: toasts and per-screen form status.
"""
from datetime import datetime, timedelta, timezone
from typing import Literal, Optional

from pydantic import BaseModel, Field

from app.config import settings

ToastKind = Literal["success", "error", "info", "warning"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Toast(BaseModel):
    message: str
    kind: ToastKind = "info"
    duration_ms: int = Field(default_factory=lambda: settings.toast_duration_ms)
    created_at: datetime = Field(default_factory=_utcnow)

    @property
    def dismiss_at(self) -> datetime:
        return self.created_at + timedelta(milliseconds=self.duration_ms)

    def is_visible(self, now: Optional[datetime] = None) -> bool:
        """Visible from creation until (not including) created_at + duration."""
        now = now or _utcnow()
        return self.created_at <= now < self.dismiss_at

    def remaining_ms(self, now: Optional[datetime] = None) -> int:
        now = now or _utcnow()
        remaining = (self.dismiss_at - now).total_seconds() * 1000
        return max(0, int(remaining))


class FormStatus(BaseModel):
    """Screen-local status: idle, busy, or error with a message."""
    state: Literal["idle", "busy", "error"] = "idle"
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> "FormStatus":
        return cls(state="idle")

    @classmethod
    def busy(cls) -> "FormStatus":
        return cls(state="busy")

    @classmethod
    def error(cls, message: str) -> "FormStatus":
        return cls(state="error", message=message)

    @property
    def is_busy(self) -> bool:
        return self.state == "busy"

    @property
    def is_error(self) -> bool:
        return self.state == "error"
