"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from src.marketplace.core.config import Settings

pytestmark = pytest.mark.unit

VALID = {
    "database_url": "sqlite+aiosqlite:///:memory:",
    "jwt_secret_key": "x" * 32,
}


def test_matching_defaults():
    settings = Settings(**VALID)
    assert settings.match_min_score == 0.30
    assert settings.match_max_candidates == 10


def test_short_jwt_secret_rejected():
    with pytest.raises(ValidationError):
        Settings(**{**VALID, "jwt_secret_key": "short"})


def test_placeholder_jwt_secret_rejected():
    with pytest.raises(ValidationError):
        Settings(**{**VALID, "jwt_secret_key": "change-this-to-a-secure-random-string"})


def test_cors_wildcard_rejected():
    with pytest.raises(ValidationError):
        Settings(**VALID, cors_origins=["*"])


@pytest.mark.parametrize("value", [-0.1, 1.5])
def test_min_score_out_of_range_rejected(value: float):
    with pytest.raises(ValidationError):
        Settings(**VALID, match_min_score=value)


def test_max_candidates_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(**VALID, match_max_candidates=0)


def test_unknown_ssl_mode_rejected():
    with pytest.raises(ValidationError):
        Settings(**VALID, database_ssl_mode="sometimes")
