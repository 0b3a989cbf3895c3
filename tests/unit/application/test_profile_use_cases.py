"""
Name: Profile Use Case Tests

Responsibilities:
  - Register hashes the password and rejects incomplete payloads
  - Get / update / delete follow the NOT_FOUND contract
  - Login: VALIDATION_ERROR, NOT_FOUND, INVALID_CREDENTIAL, token
  - Store failures surface as INTERNAL_ERROR
"""

from dataclasses import replace
from datetime import date
from unittest.mock import MagicMock

import pytest

from leavedesk.application.usecases.profiles import (
    DeleteProfileUseCase,
    GetProfileUseCase,
    ListProfilesUseCase,
    LoginInput,
    LoginUseCase,
    ProfileErrorCode,
    RegisterProfileInput,
    RegisterProfileUseCase,
    UpdateProfileInput,
    UpdateProfileUseCase,
)
from leavedesk.domain.entities import Profile
from leavedesk.domain.repositories import StoreFailure, StoreResult
from leavedesk.identity.credentials import CredentialHasher, HasherSettings

pytestmark = pytest.mark.unit


def _register_input(**overrides) -> RegisterProfileInput:
    data = RegisterProfileInput(
        user_id=2,
        first_name="Jane",
        last_name="Doe",
        email="jane@example.com",
        designation="Engineer",
        date_of_birth=date(1992, 5, 17),
        supervisor="John",
        password="s3cret",
    )
    return replace(data, **overrides)


def _update_input(**overrides) -> UpdateProfileInput:
    data = UpdateProfileInput(
        first_name="Janet",
        last_name="Doe",
        email="janet@example.com",
        designation="Lead",
        date_of_birth=date(1992, 5, 17),
        supervisor="Mary",
    )
    return replace(data, **overrides)


def _failing_repo() -> MagicMock:
    failure = StoreResult.failure(StoreFailure(message="boom", error_id="err-1"))
    repo = MagicMock()
    repo.list_profiles.return_value = failure
    repo.get_profile.return_value = failure
    repo.create_profile.return_value = failure
    repo.update_profile.return_value = failure
    repo.delete_profile.return_value = failure
    return repo


@pytest.fixture
def seeded_repo(profile_repo, profile_fields, hasher):
    profile_repo.create_profile(
        Profile.register(1, profile_fields, password_hash=hasher.hash("testpassword"))
    )
    return profile_repo


# =============================================================================
# Register
# =============================================================================


def test_register_hashes_password_and_returns_profile(profile_repo, hasher):
    result = RegisterProfileUseCase(profile_repo, hasher).execute(_register_input())

    assert result.error is None
    assert result.profile.user_id == 2
    assert result.profile.created_at is not None
    assert result.profile.password_hash != "s3cret"
    assert hasher.verify("s3cret", result.profile.password_hash)


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"user_id": None}, "userId"),
        ({"first_name": ""}, "firstName"),
        ({"email": "   "}, "email"),
        ({"date_of_birth": None}, "dateOfBirth"),
        ({"password": None}, "password"),
        ({"last_name": None, "password": None}, "lastName"),
    ],
)
def test_register_reports_first_missing_field(profile_repo, hasher, overrides, field):
    result = RegisterProfileUseCase(profile_repo, hasher).execute(
        _register_input(**overrides)
    )

    assert result.profile is None
    assert result.error.code == ProfileErrorCode.VALIDATION_ERROR
    assert result.error.message == "Missing required fields"
    assert result.error.field == field
    assert profile_repo.list_profiles().value == []


def test_register_duplicate_id_is_internal_error(seeded_repo, hasher):
    result = RegisterProfileUseCase(seeded_repo, hasher).execute(
        _register_input(user_id=1)
    )

    assert result.error.code == ProfileErrorCode.INTERNAL_ERROR
    assert result.error.error_id


def test_register_never_hashes_when_invalid(profile_repo):
    hasher = MagicMock()
    RegisterProfileUseCase(profile_repo, hasher).execute(
        _register_input(supervisor="")
    )
    hasher.hash.assert_not_called()


# =============================================================================
# List / Get
# =============================================================================


def test_list_in_insertion_order(profile_repo, hasher):
    use_case = RegisterProfileUseCase(profile_repo, hasher)
    for user_id in (5, 3, 9):
        use_case.execute(_register_input(user_id=user_id))

    result = ListProfilesUseCase(profile_repo).execute()
    assert [p.user_id for p in result.profiles] == [5, 3, 9]


def test_get_existing_and_missing(seeded_repo):
    use_case = GetProfileUseCase(seeded_repo)

    assert use_case.execute(1).profile.first_name == "Test"

    missing = use_case.execute(99)
    assert missing.profile is None
    assert missing.error.code == ProfileErrorCode.NOT_FOUND
    assert missing.error.message == "User not found"


def test_list_and_get_surface_store_failures():
    repo = _failing_repo()

    listed = ListProfilesUseCase(repo).execute()
    fetched = GetProfileUseCase(repo).execute(1)

    assert listed.profiles == []
    assert listed.error.code == ProfileErrorCode.INTERNAL_ERROR
    assert fetched.error.code == ProfileErrorCode.INTERNAL_ERROR
    assert fetched.error.message == "boom"


# =============================================================================
# Update
# =============================================================================


def test_update_replaces_mutable_fields_only(seeded_repo):
    before = seeded_repo.get_profile(1).value

    result = UpdateProfileUseCase(seeded_repo).execute(1, _update_input())

    assert result.error is None
    assert result.profile.first_name == "Janet"
    assert result.profile.user_id == 1
    assert result.profile.password_hash == before.password_hash
    assert result.profile.created_at == before.created_at


def test_update_unknown_id_is_not_found(profile_repo):
    result = UpdateProfileUseCase(profile_repo).execute(9999, _update_input())
    assert result.error.code == ProfileErrorCode.NOT_FOUND


def test_update_unknown_id_is_not_found_even_with_invalid_payload(profile_repo):
    result = UpdateProfileUseCase(profile_repo).execute(9999, UpdateProfileInput())
    assert result.error.code == ProfileErrorCode.NOT_FOUND


def test_update_existing_with_missing_field_is_validation_error(seeded_repo):
    result = UpdateProfileUseCase(seeded_repo).execute(1, _update_input(designation=""))

    assert result.error.code == ProfileErrorCode.VALIDATION_ERROR
    assert result.error.field == "designation"
    assert seeded_repo.get_profile(1).value.designation == "Tester"


@pytest.mark.parametrize("rejected", [("dateOfBirth",), ("body",)])
def test_update_with_rejected_fields_is_invalid_request(seeded_repo, rejected):
    result = UpdateProfileUseCase(seeded_repo).execute(
        1, _update_input(rejected_fields=rejected)
    )

    assert result.error.code == ProfileErrorCode.VALIDATION_ERROR
    assert result.error.message == "Invalid request"
    assert result.error.field == rejected[0]
    assert seeded_repo.get_profile(1).value.first_name == "Test"


def test_update_unknown_id_with_rejected_fields_is_not_found(profile_repo):
    result = UpdateProfileUseCase(profile_repo).execute(
        9999, UpdateProfileInput(rejected_fields=("firstName",))
    )
    assert result.error.code == ProfileErrorCode.NOT_FOUND


# =============================================================================
# Delete
# =============================================================================


def test_delete_confirms_with_first_name_then_not_found(seeded_repo):
    use_case = DeleteProfileUseCase(seeded_repo)

    first = use_case.execute(1)
    second = use_case.execute(1)

    assert first.error is None
    assert first.message == "User Test deleted successfully"
    assert second.error.code == ProfileErrorCode.NOT_FOUND


def test_delete_store_failure_is_internal_error():
    result = DeleteProfileUseCase(_failing_repo()).execute(1)
    assert result.error.code == ProfileErrorCode.INTERNAL_ERROR


# =============================================================================
# Login
# =============================================================================


def test_login_success_issues_verifiable_token(seeded_repo, hasher, token_service):
    result = LoginUseCase(seeded_repo, hasher, token_service).execute(
        LoginInput(user_id=1, password="testpassword")
    )

    assert result.error is None
    assert result.token_type == "bearer"
    assert result.expires_in == 48 * 3600
    assert token_service.verify(result.token) == 1


def test_login_wrong_password(seeded_repo, hasher, token_service):
    result = LoginUseCase(seeded_repo, hasher, token_service).execute(
        LoginInput(user_id=1, password="nope")
    )

    assert result.token is None
    assert result.error.code == ProfileErrorCode.INVALID_CREDENTIAL
    assert result.error.message == "Invalid password"


def test_login_unknown_user(seeded_repo, hasher, token_service):
    result = LoginUseCase(seeded_repo, hasher, token_service).execute(
        LoginInput(user_id=404, password="testpassword")
    )
    assert result.error.code == ProfileErrorCode.NOT_FOUND


@pytest.mark.parametrize(
    "data, field",
    [
        (LoginInput(password="x"), "userId"),
        (LoginInput(user_id=1), "password"),
        (LoginInput(user_id=1, password=""), "password"),
    ],
)
def test_login_requires_both_fields(seeded_repo, hasher, token_service, data, field):
    result = LoginUseCase(seeded_repo, hasher, token_service).execute(data)

    assert result.error.code == ProfileErrorCode.VALIDATION_ERROR
    assert result.error.message == "Missing userId or password"
    assert result.error.field == field


def test_login_store_failure_is_internal_error(hasher, token_service):
    result = LoginUseCase(_failing_repo(), hasher, token_service).execute(
        LoginInput(user_id=1, password="testpassword")
    )
    assert result.error.code == ProfileErrorCode.INTERNAL_ERROR


def test_login_rehashes_digest_created_with_other_cost(seeded_repo, token_service):
    old_digest = seeded_repo.get_profile(1).value.password_hash
    upgraded = CredentialHasher(
        HasherSettings(time_cost=2, memory_cost_kib=8, parallelism=1)
    )

    result = LoginUseCase(seeded_repo, upgraded, token_service).execute(
        LoginInput(user_id=1, password="testpassword")
    )

    new_digest = seeded_repo.get_profile(1).value.password_hash
    assert result.error is None
    assert new_digest != old_digest
    assert "t=2" in new_digest
    assert upgraded.verify("testpassword", new_digest)
    assert not upgraded.needs_rehash(new_digest)


def test_login_keeps_digest_when_cost_matches(seeded_repo, hasher, token_service):
    before = seeded_repo.get_profile(1).value.password_hash

    LoginUseCase(seeded_repo, hasher, token_service).execute(
        LoginInput(user_id=1, password="testpassword")
    )

    assert seeded_repo.get_profile(1).value.password_hash == before


def test_login_succeeds_when_rehash_cannot_be_stored(
    profile_fields, hasher, token_service
):
    profile = Profile.register(
        1, profile_fields, password_hash=hasher.hash("testpassword")
    )
    repo = MagicMock()
    repo.get_profile.return_value = StoreResult.success(profile)
    repo.update_password_hash.return_value = StoreResult.failure(
        StoreFailure(message="boom", error_id="err-2")
    )
    upgraded = CredentialHasher(
        HasherSettings(time_cost=2, memory_cost_kib=8, parallelism=1)
    )

    result = LoginUseCase(repo, upgraded, token_service).execute(
        LoginInput(user_id=1, password="testpassword")
    )

    assert result.error is None
    assert token_service.verify(result.token) == 1
    repo.update_password_hash.assert_called_once()
    assert repo.update_password_hash.call_args.args[0] == 1
