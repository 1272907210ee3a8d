"""Tests for the shared onboarding header state."""

from concurrent.futures import ThreadPoolExecutor

from app.modules.onboarding.header import (
    HeaderConfig, HeaderStore, HeaderUpdate, go_back, is_header_visible, resolve_current_step,
)


def test_defaults_before_any_screen_writes():
    store = HeaderStore()
    config = store.get_header("u1")
    assert config.current_step == 1
    assert config.total_steps == 10
    assert config.can_go_back and config.can_go_next
    assert config.next_disabled is False
    assert config.animation == "none"


def test_set_merges_only_provided_fields():
    store = HeaderStore()
    store.set_header("u1", HeaderUpdate(current_step=4, total_steps=9, back_route="/(onboarding)/profile"))
    config = store.set_header("u1", HeaderUpdate(animation="slide_from_right"))
    assert config.current_step == 4
    assert config.total_steps == 9
    assert config.back_route == "/(onboarding)/profile"
    assert config.animation == "slide_from_right"


def test_last_writer_wins_per_field():
    store = HeaderStore()
    store.set_header("u1", HeaderUpdate(next_disabled=True))
    store.set_header("u1", HeaderUpdate(next_disabled=False))
    assert store.get_header("u1").next_disabled is False


def test_users_do_not_share_headers():
    store = HeaderStore()
    store.set_header("u1", HeaderUpdate(current_step=7))
    assert store.get_header("u2").current_step == 1


def test_reset_restores_defaults():
    store = HeaderStore()
    store.set_header("u1", HeaderUpdate(current_step=7, animation="fade"))
    assert store.reset_header("u1") == HeaderConfig()
    assert store.get_header("u1") == HeaderConfig()


def test_returned_config_is_a_copy():
    store = HeaderStore()
    config = store.set_header("u1", HeaderUpdate(current_step=3))
    config.current_step = 8
    assert store.get_header("u1").current_step == 3


def test_concurrent_writers_keep_every_field():
    store = HeaderStore()
    updates = [
        HeaderUpdate(current_step=5),
        HeaderUpdate(total_steps=9),
        HeaderUpdate(next_disabled=True),
        HeaderUpdate(animation="fade"),
        HeaderUpdate(back_route="/(onboarding)/location"),
    ] * 20
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda u: store.set_header("u1", u), updates))
    config = store.get_header("u1")
    assert config.current_step == 5
    assert config.total_steps == 9
    assert config.next_disabled is True
    assert config.animation == "fade"
    assert config.back_route == "/(onboarding)/location"


def test_resolve_current_step_prefers_config():
    assert resolve_current_step(HeaderConfig(current_step=3), "/(onboarding)/height") == 3


def test_resolve_current_step_falls_back_to_route():
    config = HeaderConfig(current_step=None)
    assert resolve_current_step(config, "/(onboarding)/height") == 5
    assert resolve_current_step(config, "/(onboarding)/target-muscle-group") == 8
    assert resolve_current_step(config, "/somewhere/else") == 1
    assert resolve_current_step(config, None) == 1


def test_go_back_is_noop_when_disabled():
    config = HeaderConfig(can_go_back=False, back_route="/(onboarding)/mood")
    assert go_back(config) is None


def test_go_back_returns_back_route():
    config = HeaderConfig(back_route="/(onboarding)/mood")
    assert go_back(config) == "/(onboarding)/mood"


def test_header_hidden_on_finish():
    assert is_header_visible("/(onboarding)/finish") is False
    assert is_header_visible("/(onboarding)/dietary") is True
