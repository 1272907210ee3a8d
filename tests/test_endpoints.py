"""Endpoint tests via httpx against the ASGI app."""

from __future__ import annotations

import logging

import httpx
import pytest

from app.modules.affirmations.inference import HuggingFaceClient, get_inference_client
from app.main import app, lifespan
from app.modules.onboarding.header import header_store

from tests.conftest import USER_ID, make_plan, make_profile

API = "/api/v1"


class TestService:
    @pytest.mark.asyncio
    async def test_root_and_health(self, client):
        resp = await client.get("/")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
        resp = await client.get("/health")
        assert resp.json() == {"status": "healthy"}
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-Frame-Options"] == "DENY"

    @pytest.mark.asyncio
    async def test_lifespan_logs_start_and_stop(self, caplog):
        caplog.set_level(logging.INFO, logger="app.main")
        async with lifespan(app):
            pass
        messages = [record.getMessage() for record in caplog.records]
        assert any("starting" in m for m in messages)
        assert messages[-1].endswith("stopped")

    @pytest.mark.asyncio
    async def test_ready(self, client, fake_supabase):
        resp = await client.get("/ready")
        assert resp.status_code == 200
        fake_supabase.fail("user_profile")
        resp = await client.get("/ready")
        assert resp.status_code == 503


class TestOnboardingEndpoints:
    @pytest.mark.asyncio
    async def test_steps_catalogue(self, client):
        resp = await client.get(f"{API}/onboarding/steps")
        assert resp.status_code == 200
        body = resp.json()
        assert body["total_steps"] == 9
        assert [s["key"] for s in body["steps"]][:3] == ["language", "mood", "profile"]
        assert body["options"]["language"]["languages"] == ["en", "fil", "es"]

    @pytest.mark.asyncio
    async def test_wizard_flow(self, client, fake_supabase):
        resp = await client.get(f"{API}/onboarding/resume")
        assert resp.json()["route"] == "/(onboarding)/language"

        resp = await client.post(f"{API}/onboarding/steps/language", json={"preferred_language": "en"})
        assert resp.status_code == 200
        assert resp.json()["next_route"] == "/(onboarding)/mood"

        resp = await client.post(f"{API}/onboarding/steps/mood", json={"current_mood": "energetic"})
        body = resp.json()
        assert body["status"]["state"] == "idle"
        assert body["affirmation"]

        resp = await client.get(f"{API}/onboarding/resume")
        assert resp.json() == {"route": "/(onboarding)/profile", "current_step": 3, "is_onboarding_complete": False}

        resp = await client.get(f"{API}/onboarding/header")
        assert resp.json()["animation"] == "slide_from_right"

        resp = await client.post(f"{API}/onboarding/steps/profile/back")
        assert resp.json()["next_route"] == "/(onboarding)/mood"
        assert resp.json()["header"]["animation"] == "slide_from_left"

    @pytest.mark.asyncio
    async def test_incomplete_step_is_422(self, client):
        resp = await client.post(f"{API}/onboarding/steps/location", json={"country": "PH"})
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_step_is_404(self, client):
        resp = await client.post(f"{API}/onboarding/steps/pets", json={})
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_save_failure_returns_error_status(self, client, fake_supabase):
        fake_supabase.fail("user_profile")
        resp = await client.post(f"{API}/onboarding/steps/weight", json={"weight": 61.5, "weight_unit": "kg"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == {"state": "error", "message": "Failed to save your weight. Please try again."}
        assert body["toast"]["kind"] == "error"
        assert body["toast"]["duration_ms"] == 4000
        assert body["next_route"] is None

    @pytest.mark.asyncio
    async def test_validate_then_header(self, client):
        resp = await client.post(f"{API}/onboarding/steps/height/validate", json={"height": 0})
        assert resp.json()["valid"] is False
        resp = await client.get(f"{API}/onboarding/header")
        assert resp.json()["next_disabled"] is True
        assert resp.json()["current_step"] == 5

    @pytest.mark.asyncio
    async def test_header_merge_and_reset(self, client):
        await client.post(f"{API}/onboarding/header", json={"current_step": 6, "total_steps": 9})
        resp = await client.post(f"{API}/onboarding/header", json={"animation": "fade"})
        assert resp.json()["current_step"] == 6
        assert resp.json()["animation"] == "fade"
        resp = await client.post(f"{API}/onboarding/header/reset")
        assert resp.json()["current_step"] == 1
        assert resp.json()["total_steps"] == 10

    @pytest.mark.asyncio
    async def test_header_for_route(self, client):
        resp = await client.get(f"{API}/onboarding/header", params={"route": "/(onboarding)/finish"})
        assert resp.json()["visible"] is False

        await client.post(f"{API}/onboarding/header", json={"current_step": None})
        resp = await client.get(f"{API}/onboarding/header", params={"route": "/(onboarding)/height"})
        body = resp.json()
        assert body["current_step"] == 5
        assert body["visible"] is True

        resp = await client.get(f"{API}/onboarding/header")
        assert resp.json()["current_step"] == 1

    @pytest.mark.asyncio
    async def test_back_respects_header(self, client):
        await client.post(f"{API}/onboarding/header", json={"current_step": 3, "can_go_back": False})
        resp = await client.post(f"{API}/onboarding/steps/profile/back")
        assert resp.json()["next_route"] is None

        resp = await client.post(f"{API}/onboarding/steps/weight/back")
        assert resp.json()["next_route"] == "/(onboarding)/height"
        assert resp.json()["header"]["animation"] == "slide_from_left"

    @pytest.mark.asyncio
    async def test_finish_clears_header(self, client, fake_supabase):
        await client.post(f"{API}/onboarding/steps/language", json={"preferred_language": "en"})
        resp = await client.post(f"{API}/onboarding/steps/finish")
        assert resp.json()["header"]["animation"] == "fade"
        assert USER_ID not in header_store._configs

    @pytest.mark.asyncio
    async def test_finish(self, client, fake_supabase):
        fake_supabase.tables["user_profile"] = [make_profile(current_step=9, full_name="Maria Santos")]
        resp = await client.post(f"{API}/onboarding/steps/finish")
        body = resp.json()
        assert body["next_route"] == "/(tabs)/home"
        assert body["affirmation"].startswith("Maria, ")
        resp = await client.get(f"{API}/auth/me")
        assert resp.json()["is_onboarding_complete"] is True
        assert resp.json()["current_step"] == 10


class TestMeasurementEndpoints:
    @pytest.mark.asyncio
    async def test_ruler(self, client):
        resp = await client.get(f"{API}/measurements/rulers/lb")
        body = resp.json()
        assert body["max_marks"] == 660
        assert body["major_interval"] == 20
        assert len(body["marks"]) == 661

    @pytest.mark.asyncio
    async def test_unknown_ruler_is_404(self, client):
        resp = await client.get(f"{API}/measurements/rulers/stone")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_convert(self, client):
        resp = await client.post(f"{API}/measurements/convert", json={"value": 100, "from_unit": "kg", "to_unit": "lb"})
        assert resp.json()["value"] == pytest.approx(220.462)
        resp = await client.post(f"{API}/measurements/convert", json={"value": 100, "from_unit": "kg", "to_unit": "cm"})
        assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_scroll_and_toggle(self, client):
        resp = await client.post(f"{API}/measurements/value", json={"offset": 1755, "unit": "cm", "current_value": 170})
        body = resp.json()
        assert body["value"] == 176
        assert body["changed"] is True
        assert body["input_text"] == "176"

        resp = await client.post(f"{API}/measurements/toggle", json={"value": 176, "unit": "cm", "new_unit": "ft"})
        body = resp.json()
        assert body["unit"] == "ft"
        assert body["display"] == "5'9\""

        resp = await client.post(
            f"{API}/measurements/toggle",
            json={"value": 176, "unit": "cm", "new_unit": "ft", "is_scrolling": True},
        )
        assert resp.json()["unit"] == "cm"
        assert resp.json()["changed"] is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path,body", [
        ("value", '{"offset": Infinity, "unit": "cm"}'),
        ("value", '{"offset": 100, "unit": "cm", "current_value": NaN}'),
        ("toggle", '{"value": Infinity, "unit": "cm", "new_unit": "ft"}'),
        ("offset", '{"value": -Infinity, "unit": "kg"}'),
        ("convert", '{"value": NaN, "from_unit": "kg", "to_unit": "lb"}'),
    ])
    async def test_non_finite_numbers_are_422(self, client, path, body):
        resp = await client.post(
            f"{API}/measurements/{path}",
            content=body,
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_parse(self, client):
        resp = await client.post(f"{API}/measurements/parse", json={"text": "abc", "unit": "kg"})
        assert resp.json() == {"value": None, "valid": False}


class TestAffirmationEndpoints:
    @pytest.mark.asyncio
    async def test_onboarding_affirmation(self, client):
        resp = await client.post(f"{API}/affirmations/onboarding", json={"nickname": "Ria", "preferred_language": "fil"})
        body = resp.json()
        assert "Ria" in body["affirmation"]
        assert body["language"] == "fil"
        assert body["reveal_after_ms"] == 150

    @pytest.mark.asyncio
    async def test_unknown_language_reports_english(self, client):
        resp = await client.post(f"{API}/affirmations/dietary", json={"preferred_language": "de"})
        assert resp.json()["language"] == "en"

    @pytest.mark.asyncio
    async def test_generate_maps_failure_to_503(self, client):
        failing = HuggingFaceClient(
            api_key="k", api_url="https://hf.test", model="m",
            transport=httpx.MockTransport(lambda r: httpx.Response(500)),
        )
        app.dependency_overrides[get_inference_client] = lambda: failing
        resp = await client.post(f"{API}/affirmations/inference/generate", json={"prompt": "hi"})
        assert resp.status_code == 503
        resp = await client.get(f"{API}/affirmations/inference/status")
        assert resp.json() == {"available": False, "model": "m"}


class TestWorkoutEndpoints:
    @pytest.mark.asyncio
    async def test_details_fetches_gender_and_plan(self, client, fake_supabase):
        fake_supabase.tables.update({
            "user_profile": [make_profile(gender="Female")],
            "workout_plans": [make_plan("p1")],
        })
        resp = await client.get(f"{API}/workouts/p1/details")
        assert resp.status_code == 200
        body = resp.json()
        assert body["gender"] == "female"
        assert body["plan"]["id"] == "p1"
        assert body["plan"]["exercises"] == []

    @pytest.mark.asyncio
    async def test_details_missing_plan_is_404(self, client):
        resp = await client.get(f"{API}/workouts/missing/details")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_static_paths_are_not_plan_ids(self, client, fake_supabase):
        fake_supabase.tables["workout_tags"] = [{"id": "t1", "name": "Core"}]
        resp = await client.get(f"{API}/workouts/tags")
        assert resp.json() == [{"id": "t1", "name": "Core"}]

    @pytest.mark.asyncio
    async def test_user_workouts_crud(self, client, fake_supabase):
        resp = await client.post(f"{API}/user-workouts", json={"name": "Lunch HIIT", "level": "intermediate"})
        assert resp.status_code == 201
        plan_id = resp.json()["id"]
        assert resp.json()["user_id"] == USER_ID

        resp = await client.put(f"{API}/user-workouts/{plan_id}", json={"total_minutes": 25})
        assert resp.json()["total_minutes"] == 25

        resp = await client.get(f"{API}/user-workouts")
        assert [p["id"] for p in resp.json()] == [plan_id]

        resp = await client.delete(f"{API}/user-workouts/{plan_id}")
        assert resp.status_code == 204
        resp = await client.get(f"{API}/user-workouts/{plan_id}")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_user_plan_builder(self, client, fake_supabase):
        fake_supabase.tables["workout_tags"] = [{"id": "t1", "name": "Core"}]
        resp = await client.post(f"{API}/user-workouts", json={"name": "Core blast", "level": "beginner"})
        plan_id = resp.json()["id"]

        resp = await client.put(f"{API}/user-workouts/{plan_id}/tags/t1")
        assert resp.json() == [{"id": "t1", "name": "Core"}]

        for position, exercise_id in enumerate(["plank", "crunch"]):
            resp = await client.post(
                f"{API}/user-workouts/{plan_id}/exercises",
                json={"exercise_id": exercise_id, "position": position},
            )
            assert resp.status_code == 201

        resp = await client.post(
            f"{API}/user-workouts/{plan_id}/exercises/reorder",
            json={"exercises": [{"exercise_id": "plank", "position": 1}, {"exercise_id": "crunch", "position": 0}]},
        )
        assert [e["exercise_id"] for e in resp.json()] == ["crunch", "plank"]

        resp = await client.put(f"{API}/user-workouts/{plan_id}/exercises/plank", json={"reps": 3})
        assert resp.json()["reps"] == 3

        resp = await client.delete(f"{API}/user-workouts/{plan_id}/exercises/crunch")
        assert resp.status_code == 204
        resp = await client.delete(f"{API}/user-workouts/{plan_id}/tags/t1")
        assert resp.status_code == 204

        resp = await client.get(f"{API}/user-workouts/level/BEGINNER")
        assert [p["id"] for p in resp.json()] == [plan_id]

        resp = await client.put(f"{API}/user-workouts/{plan_id}", json={"name": "  "})
        assert resp.status_code == 400


class TestProfileEndpoints:
    @pytest.mark.asyncio
    async def test_profile_roundtrip(self, client):
        resp = await client.get(f"{API}/profiles/me")
        assert resp.status_code == 404
        resp = await client.put(f"{API}/profiles/me", json={"nickname": "Ria", "weekly_budget": 25})
        assert resp.status_code == 200
        assert resp.json()["nickname"] == "Ria"
        resp = await client.get(f"{API}/profiles/me")
        assert resp.json()["weekly_budget"] == 25

    @pytest.mark.asyncio
    async def test_only_member_role_is_writable(self, client):
        resp = await client.put(f"{API}/profiles/me/role", json={"role": "admin"})
        assert resp.status_code == 422
        resp = await client.put(f"{API}/profiles/me/role", json={"role": "member"})
        assert resp.json() == {"user_id": USER_ID, "role": "member"}


class TestPlanEndpoints:
    @pytest.mark.asyncio
    async def test_plans(self, client, fake_supabase):
        fake_supabase.tables["plans"] = [
            {"code": "pro", "name": "Pro", "price_usd": 9.99, "is_active": True,
             "features": {"modules": {"training": True}}},
        ]
        resp = await client.get(f"{API}/plans")
        assert resp.json()[0]["feature_list"] == ["Advanced training programs"]
        resp = await client.get(f"{API}/plans/nope")
        assert resp.status_code == 404
