"""Unit tests for app.core.config.Settings validation."""

import unittest

from pydantic import ValidationError

from app.core.config import Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        self.assertEqual(settings.PORT, 3000)
        self.assertEqual(settings.JWT_ALGORITHM, "HS256")
        self.assertGreaterEqual(settings.BCRYPT_ROUNDS, 10)

    def test_rejects_non_postgres_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="mysql://localhost/db")

    def test_normalizes_postgres_alias(self) -> None:
        settings = Settings(_env_file=None, DATABASE_URL="postgres://u:p@host:5432/db")
        self.assertEqual(settings.DATABASE_URL, "postgresql://u:p@host:5432/db")

    def test_rejects_low_bcrypt_cost(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, BCRYPT_ROUNDS=4)

    def test_rejects_blank_secret(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, JWT_SECRET="   ")

    def test_rejects_bad_port(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, PORT=70000)


if __name__ == "__main__":
    unittest.main()
