"""Shared test fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from residency.main import app
from residency.rate_limiter import limiter
from residency.schemas.profile import Profile


def make_profile(
    status_history: list[tuple[str, str, str | None]] | None = None,
    absences: list[tuple[str, str]] | None = None,
    **extra,
) -> Profile:
    """Build a profile from (status, from, to) and (from, to) tuples."""
    data = {
        "statusHistory": [
            {"id": str(i), "status": status, "from": start, "to": end}
            for i, (status, start, end) in enumerate(status_history or [])
        ],
        "travelAbsences": [
            {"id": str(i), "from": start, "to": end}
            for i, (start, end) in enumerate(absences or [])
        ],
        **extra,
    }
    return Profile.model_validate(data)


@pytest.fixture
def reference_date() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def client():
    """Test client with a fresh rate limiter."""
    limiter.reset()
    with TestClient(app) as test_client:
        yield test_client
