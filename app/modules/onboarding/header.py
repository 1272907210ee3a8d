"""
Shared wizard header state.

Every onboarding screen writes a partial config (step number, where back/next
go, whether next is disabled, which transition to play) and the one header
component reads it. Writes merge field by field; the last writer wins.
"""
import threading
from typing import Dict, Literal, Optional

from pydantic import BaseModel

from app.config.onboarding_config import get_route_step_map

Animation = Literal["slide_from_right", "slide_from_left", "fade", "none"]

HIDDEN_ON = ("finish",)


class HeaderConfig(BaseModel):
    current_step: Optional[int] = 1
    total_steps: int = 10
    can_go_next: bool = True
    can_go_back: bool = True
    next_disabled: bool = False
    back_route: Optional[str] = None
    next_route: Optional[str] = None
    animation: Animation = "none"


class HeaderUpdate(BaseModel):
    current_step: Optional[int] = None
    total_steps: Optional[int] = None
    can_go_next: Optional[bool] = None
    can_go_back: Optional[bool] = None
    next_disabled: Optional[bool] = None
    back_route: Optional[str] = None
    next_route: Optional[str] = None
    animation: Optional[Animation] = None


class HeaderStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._configs: Dict[str, HeaderConfig] = {}

    def get_header(self, user_id: str) -> HeaderConfig:
        with self._lock:
            config = self._configs.get(user_id)
            return config.model_copy() if config else HeaderConfig()

    def set_header(self, user_id: str, update: HeaderUpdate) -> HeaderConfig:
        """Merge the fields the caller actually set into the user's config."""
        changes = update.model_dump(exclude_unset=True)
        with self._lock:
            current = self._configs.get(user_id) or HeaderConfig()
            merged = current.model_copy(update=changes)
            self._configs[user_id] = merged
            return merged.model_copy()

    def reset_header(self, user_id: str) -> HeaderConfig:
        with self._lock:
            self._configs.pop(user_id, None)
        return HeaderConfig()

    def clear(self) -> None:
        with self._lock:
            self._configs.clear()


def route_key(route: Optional[str]) -> str:
    """Last path segment: "/(onboarding)/height" -> "height"."""
    if not route:
        return ""
    return route.rstrip("/").split("/")[-1]


def resolve_current_step(config: HeaderConfig, route: Optional[str] = None) -> int:
    if config.current_step:
        return config.current_step
    return get_route_step_map().get(route_key(route), 1)


def is_header_visible(route: Optional[str]) -> bool:
    return route_key(route) not in HIDDEN_ON


def go_back(config: HeaderConfig) -> Optional[str]:
    """Route the back button navigates to, or None when back is disabled."""
    if not config.can_go_back:
        return None
    return config.back_route


class HeaderView(HeaderConfig):
    """What the header renders on a given route."""
    visible: bool = True


def view_for_route(config: HeaderConfig, route: Optional[str] = None) -> HeaderView:
    return HeaderView(
        **config.model_dump(exclude={"current_step"}),
        current_step=resolve_current_step(config, route),
        visible=is_header_visible(route),
    )


header_store = HeaderStore()
