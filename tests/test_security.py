"""Tests for password hashing and access tokens."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from farmbooks.core.config import Settings, get_settings
from farmbooks.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    def test_round_trip(self):
        hashed = hash_password("layer-feed-2025")

        assert hashed != "layer-feed-2025"
        assert verify_password("layer-feed-2025", hashed)
        assert not verify_password("layer-feed-2026", hashed)

    def test_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_non_bcrypt_hash(self):
        assert not verify_password("anything", "plain-text")


class TestAccessToken:
    def test_claims(self):
        token = create_access_token({"id": 7, "email": "a@kaasifarms.com", "role": "admin"})

        claims = decode_access_token(token)

        assert claims["id"] == 7
        assert claims["email"] == "a@kaasifarms.com"
        assert claims["role"] == "admin"
        assert claims["exp"] > datetime.now(timezone.utc).timestamp()

    def test_expiry_is_one_day(self):
        token = create_access_token({"id": 1})

        expires = datetime.fromtimestamp(decode_access_token(token)["exp"], tz=timezone.utc)

        remaining = expires - datetime.now(timezone.utc)
        assert timedelta(hours=23) < remaining <= timedelta(days=1)

    def test_expired(self):
        settings = get_settings()
        token = jwt.encode(
            {"id": 1, "exp": datetime.now(timezone.utc) - timedelta(seconds=5)},
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_tampered(self):
        token = jwt.encode({"id": 1}, "some-other-secret", algorithm="HS256")

        with pytest.raises(jwt.InvalidSignatureError):
            decode_access_token(token)

    def test_missing_secret(self, monkeypatch):
        monkeypatch.setattr(get_settings(), "jwt_secret", "")

        with pytest.raises(ValueError, match="Invalid jwt key"):
            create_access_token({"id": 1})


def test_tables_not_created_on_startup_by_default(monkeypatch):
    monkeypatch.delenv("CREATE_TABLES_ON_STARTUP", raising=False)

    assert Settings(_env_file=None).create_tables_on_startup is False
