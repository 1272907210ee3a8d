"""Tests for profile and role persistence."""

import pytest
from fastapi import HTTPException

from app.modules.profiles.schemas import ProfileUpdate
from app.modules.profiles.service import ProfileService

from tests.conftest import USER_ID, FakeSupabase, make_profile


def test_find_profile_none_for_new_user():
    assert ProfileService(FakeSupabase()).find_profile(USER_ID) is None


def test_get_profile_missing_is_404_not_500():
    with pytest.raises(HTTPException) as exc:
        ProfileService(FakeSupabase()).get_profile(USER_ID)
    assert exc.value.status_code == 404


def test_upsert_writes_only_set_fields_and_stamps_updated_at():
    fake = FakeSupabase({"user_profile": [make_profile(full_name="Maria Santos", gender="female")]})
    profile = ProfileService(fake).upsert_profile(USER_ID, ProfileUpdate(current_mood="calm"))
    assert profile.full_name == "Maria Santos"
    assert profile.current_mood == "calm"
    assert profile.updated_at is not None
    assert len(fake.rows("user_profile")) == 1


def test_update_missing_profile_is_404():
    with pytest.raises(HTTPException) as exc:
        ProfileService(FakeSupabase()).update_profile(USER_ID, {"nickname": "Ria"})
    assert exc.value.status_code == 404


def test_delete_profile():
    fake = FakeSupabase({"user_profile": [make_profile()]})
    assert ProfileService(fake).delete_profile(USER_ID) is True
    assert ProfileService(fake).delete_profile(USER_ID) is False


def test_database_failure_is_500():
    fake = FakeSupabase()
    fake.fail("user_profile")
    with pytest.raises(HTTPException) as exc:
        ProfileService(fake).find_profile(USER_ID)
    assert exc.value.status_code == 500


@pytest.mark.parametrize("stored, expected", [("Female", "female"), (None, "male")])
def test_gender_defaults_to_male(stored, expected):
    fake = FakeSupabase({"user_profile": [make_profile(gender=stored)]})
    assert ProfileService(fake).get_gender(USER_ID) == expected


def test_gender_on_error_is_male():
    fake = FakeSupabase()
    fake.fail("user_profile")
    assert ProfileService(fake).get_gender(USER_ID) == "male"


def test_roles_use_the_role_client():
    anon, service_role = FakeSupabase(), FakeSupabase()
    profiles = ProfileService(anon, role_client=service_role)
    profiles.upsert_role(USER_ID, "member")
    profiles.upsert_role(USER_ID, "member")
    assert anon.rows("user_role") == []
    assert len(service_role.rows("user_role")) == 1
    assert profiles.get_role(USER_ID).role == "member"


def test_missing_role_is_404():
    with pytest.raises(HTTPException) as exc:
        ProfileService(FakeSupabase()).get_role(USER_ID)
    assert exc.value.status_code == 404
