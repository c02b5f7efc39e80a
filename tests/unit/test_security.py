"""Tests for bearer token handling."""

from datetime import timedelta
from uuid import uuid4

import pytest
from jose import jwt

from src.marketplace.core.config import get_settings
from src.marketplace.core.security import (
    AccessClaims,
    create_access_token,
    decode_access_token,
    decode_token,
)

pytestmark = pytest.mark.unit


def test_token_round_trip_claims():
    user_id = uuid4()

    payload = decode_token(create_access_token(user_id, "consultant"))

    assert payload is not None
    assert payload["sub"] == str(user_id)
    assert payload["role"] == "consultant"
    assert payload["type"] == "access"


def test_expired_token_rejected():
    token = create_access_token(uuid4(), "sme", expires_delta=timedelta(seconds=-1))
    assert decode_token(token) is None


def test_wrong_signature_rejected():
    token = jwt.encode(
        {"sub": str(uuid4()), "role": "sme", "type": "access"},
        "another-secret-key-of-at-least-32-chars!!",
        algorithm=get_settings().jwt_algorithm,
    )
    assert decode_token(token) is None


def test_garbage_rejected():
    assert decode_token("not-a-jwt") is None


def _sign(claims: dict) -> str:
    settings = get_settings()
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def test_access_claims():
    user_id = uuid4()

    claims = decode_access_token(create_access_token(user_id, "sme"))

    assert claims == AccessClaims(subject=user_id, role="sme")


@pytest.mark.parametrize(
    "claims",
    [
        {"sub": "00000000-0000-4000-8000-000000000001", "role": "sme", "type": "refresh"},
        {"sub": "not-a-uuid", "role": "sme", "type": "access"},
        {"role": "sme", "type": "access"},
        {"sub": "00000000-0000-4000-8000-000000000001", "type": "access"},
    ],
)
def test_access_claims_rejected(claims: dict):
    assert decode_access_token(_sign(claims)) is None
