"""
Name: In-Memory Repository Tests

Responsibilities:
  - Same StoreResult contract as the PostgreSQL adapters
  - Insertion order, duplicate ids, never-reused leave ids
"""

import pytest

from leavedesk.domain.entities import Profile, ProfileFields

pytestmark = pytest.mark.unit


def _profile(user_id, fields):
    return Profile.register(user_id, fields, password_hash="digest")


def test_profiles_keep_insertion_order(profile_repo, profile_fields):
    for user_id in (3, 1, 2):
        profile_repo.create_profile(_profile(user_id, profile_fields))

    listed = profile_repo.list_profiles().value

    assert [p.user_id for p in listed] == [3, 1, 2]
    assert all(p.created_at is not None for p in listed)


def test_duplicate_profile_is_failure(profile_repo, profile_fields):
    assert profile_repo.create_profile(_profile(1, profile_fields)).ok

    result = profile_repo.create_profile(_profile(1, profile_fields))

    assert not result.ok
    assert "pk_users" in result.error.message
    assert result.error.error_id


def test_update_keeps_credential_and_created_at(profile_repo, profile_fields):
    created = profile_repo.create_profile(_profile(1, profile_fields)).value
    changed = ProfileFields(
        first_name="Ann",
        last_name=profile_fields.last_name,
        email=profile_fields.email,
        designation=profile_fields.designation,
        date_of_birth=profile_fields.date_of_birth,
        supervisor=profile_fields.supervisor,
    )

    updated = profile_repo.update_profile(1, changed).value

    assert updated.first_name == "Ann"
    assert updated.password_hash == "digest"
    assert updated.created_at == created.created_at


def test_missing_profile_is_success_none(profile_repo, profile_fields):
    assert profile_repo.get_profile(9).value is None
    assert profile_repo.update_profile(9, profile_fields).value is None
    assert profile_repo.delete_profile(9).value is None
    assert profile_repo.get_profile(9).ok


def test_update_password_hash_replaces_only_the_digest(profile_repo, profile_fields):
    created = profile_repo.create_profile(_profile(1, profile_fields)).value

    updated = profile_repo.update_password_hash(1, "new-digest").value

    assert updated.password_hash == "new-digest"
    assert updated.first_name == created.first_name
    assert updated.created_at == created.created_at
    assert profile_repo.get_profile(1).value.password_hash == "new-digest"
    assert profile_repo.update_password_hash(9, "x").value is None


def test_leave_ids_are_never_reused(leave_repo, leave_fields):
    first = leave_repo.create_leave(leave_fields).value
    second = leave_repo.create_leave(leave_fields).value
    leave_repo.delete_leave(second.leave_id)

    third = leave_repo.create_leave(leave_fields).value

    assert (first.leave_id, second.leave_id, third.leave_id) == (1, 2, 3)
    assert [leave.leave_id for leave in leave_repo.list_leaves().value] == [1, 3]


def test_leave_delete_twice(leave_repo, leave_fields):
    leave = leave_repo.create_leave(leave_fields).value

    assert leave_repo.delete_leave(leave.leave_id).value == leave
    assert leave_repo.delete_leave(leave.leave_id).value is None


def test_ping(profile_repo, leave_repo):
    assert profile_repo.ping() is True
    assert leave_repo.ping() is True
