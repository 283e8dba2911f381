"""Unit tests for app.core.security: bcrypt hashing and JWT issue/verify."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt
from pydantic import SecretStr

from app.core.config import Settings
from app.core.security import (
    ExpiredTokenError,
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    hash_password,
    subject_id,
    verify_password,
)


def _settings(**overrides: object) -> Settings:
    values = {"JWT_SECRET": SecretStr("unit-test-secret"), "JWT_EXPIRE_MINUTES": 5}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestPasswordHashing(unittest.TestCase):
    """hash_password produces a salted bcrypt hash that verify_password accepts."""

    def test_round_trip(self) -> None:
        hashed = hash_password("secret123")
        self.assertNotEqual(hashed, "secret123")
        self.assertTrue(hashed.startswith("$2"))
        self.assertTrue(verify_password("secret123", hashed))
        self.assertFalse(verify_password("wrong", hashed))

    def test_salted(self) -> None:
        self.assertNotEqual(hash_password("secret123"), hash_password("secret123"))

    def test_cost_factor_is_applied(self) -> None:
        hashed = hash_password("secret123", rounds=11)
        self.assertEqual(hashed.split("$")[2], "11")

    def test_garbage_hash_does_not_verify(self) -> None:
        self.assertFalse(verify_password("secret123", "not-a-bcrypt-hash"))


class TestAccessToken(unittest.TestCase):
    """Tokens carry id/name (and role for admins) and fail closed when tampered or expired."""

    def test_member_claims(self) -> None:
        settings = _settings()
        claims = decode_access_token(create_access_token(7, "alice", settings), settings)
        self.assertEqual(claims["sub"], "7")
        self.assertEqual(claims["id"], 7)
        self.assertEqual(claims["name"], "alice")
        self.assertNotIn("role", claims)
        self.assertEqual(subject_id(claims), 7)

    def test_admin_role_claim(self) -> None:
        settings = _settings()
        token = create_access_token(1, "root", settings, role="admin")
        self.assertEqual(decode_access_token(token, settings)["role"], "admin")

    def test_expiry_follows_settings(self) -> None:
        settings = _settings(JWT_EXPIRE_MINUTES=30)
        claims = decode_access_token(create_access_token(1, "a", settings), settings)
        self.assertEqual(claims["exp"] - claims["iat"], 30 * 60)

    def test_expired_token(self) -> None:
        settings = _settings()
        past = datetime.now(UTC) - timedelta(minutes=10)
        token = jwt.encode(
            {"sub": "1", "id": 1, "name": "a", "iat": past, "exp": past + timedelta(minutes=1)},
            "unit-test-secret",
            algorithm="HS256",
        )
        with self.assertRaises(ExpiredTokenError) as ctx:
            decode_access_token(token, settings)
        self.assertEqual(ctx.exception.message, "Token expired")

    def test_wrong_secret(self) -> None:
        token = create_access_token(1, "a", _settings(JWT_SECRET=SecretStr("other-secret")))
        with self.assertRaises(InvalidTokenError):
            decode_access_token(token, _settings())

    def test_malformed_token(self) -> None:
        with self.assertRaises(InvalidTokenError):
            decode_access_token("not.a.jwt", _settings())

    def test_missing_subject(self) -> None:
        with self.assertRaises(InvalidTokenError):
            subject_id({"name": "a"})
        with self.assertRaises(InvalidTokenError):
            subject_id({"sub": "abc"})


if __name__ == "__main__":
    unittest.main()
