"""Settings validation of numeric bounds."""

import pytest
from pydantic import ValidationError

from colletro.core.config import Settings

_REQUIRED = {
    "database_url": "postgresql+asyncpg://u:p@localhost:5432/db",
    "secret_key": "s",
}


def test_defaults_keep_cover_deadline_below_request_timeout() -> None:
    settings = Settings(**_REQUIRED)
    assert settings.cover_generation_deadline_seconds < settings.request_timeout_seconds


def test_cover_deadline_must_be_below_request_timeout() -> None:
    with pytest.raises(ValidationError, match="cover_generation_deadline_seconds"):
        Settings(**_REQUIRED, request_timeout_seconds=30, cover_generation_deadline_seconds=30)


def test_sample_rate_bounds() -> None:
    with pytest.raises(ValidationError, match="telemetry_sample_rate"):
        Settings(**_REQUIRED, telemetry_sample_rate=1.5)


def test_redis_and_telemetry_are_off_by_default() -> None:
    settings = Settings(**_REQUIRED)
    assert settings.redis_enabled is False
    assert settings.telemetry_enabled is False
