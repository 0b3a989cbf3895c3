"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure the test environment (APP_ENV=test => in-memory repositories)
  - Provide fast identity services (cheap Argon2 cost, fixed clock)
  - Provide in-memory repositories and sample domain entities
  - Reset cached singletons between tests

Collaborators:
  - pytest: Test framework
  - leavedesk.container: cached factories
  - leavedesk.domain: entities and repositories

Notes:
  - Fixtures are auto-discovered by pytest
  - Environment is set before any Settings instance is built
"""

import os
import sys
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-secret")
# Minimal Argon2 cost: keeps the suite fast, digests stay real Argon2id.
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST_KIB", "8")
os.environ.setdefault("ARGON2_PARALLELISM", "1")

from leavedesk.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from leavedesk.container import clear_container_caches  # noqa: E402
from leavedesk.domain.entities import LeaveFields, ProfileFields  # noqa: E402
from leavedesk.identity.credentials import (  # noqa: E402
    CredentialHasher,
    HasherSettings,
)
from leavedesk.identity.tokens import TokenService, TokenSettings  # noqa: E402
from leavedesk.infrastructure.repositories import (  # noqa: E402
    InMemoryLeaveRepository,
    InMemoryProfileRepository,
)

FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


@pytest.fixture(autouse=True)
def _reset_singletons():
    """R: Fresh settings, repositories and identity services for each test."""
    app_config.get_settings.cache_clear()
    clear_container_caches()
    yield
    app_config.get_settings.cache_clear()
    clear_container_caches()


# ============================================================================
# Identity
# ============================================================================


@pytest.fixture
def hasher() -> CredentialHasher:
    """R: Real Argon2id with the cheapest valid cost."""
    return CredentialHasher(
        HasherSettings(time_cost=1, memory_cost_kib=8, parallelism=1)
    )


@pytest.fixture
def clock():
    """R: Mutable clock; tests move time with clock.now = ..."""

    class _Clock:
        now = FIXED_NOW

        def __call__(self) -> datetime:
            return self.now

    return _Clock()


@pytest.fixture
def token_service(clock) -> TokenService:
    return TokenService(TokenSettings(secret="unit-test-secret"), clock=clock)


# ============================================================================
# Repositories / entities
# ============================================================================


@pytest.fixture
def profile_repo() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def leave_repo() -> InMemoryLeaveRepository:
    return InMemoryLeaveRepository()


@pytest.fixture
def profile_fields() -> ProfileFields:
    return ProfileFields(
        first_name="Test",
        last_name="User",
        email="testuser@example.com",
        designation="Tester",
        date_of_birth=date(1990, 1, 1),
        supervisor="Supervisor",
    )


@pytest.fixture
def leave_fields() -> LeaveFields:
    return LeaveFields(
        date_from=date(2023, 1, 1),
        date_to=date(2023, 1, 10),
        leave_type="Sick",
        reason="Flu",
        emergency_contact="1234567890",
        user_id=1,
    )


# ============================================================================
# HTTP (FastAPI TestClient over the real app, in-memory repositories)
# ============================================================================

SEED_PASSWORD = "testpassword"


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from leavedesk.api.main import app

    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def seeded_profile(profile_fields):
    """R: Profile 1 with password "testpassword" in the app's repository."""
    from leavedesk.container import get_credential_hasher, get_profile_repository
    from leavedesk.domain.entities import Profile

    profile = Profile.register(
        1,
        profile_fields,
        password_hash=get_credential_hasher().hash(SEED_PASSWORD),
    )
    return get_profile_repository().create_profile(profile).value


@pytest.fixture
def auth_headers(seeded_profile) -> dict[str, str]:
    from leavedesk.container import get_token_service

    token = get_token_service().issue(seeded_profile.user_id).token
    return {"Authorization": f"Bearer {token}"}
