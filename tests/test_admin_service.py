"""Unit tests for app.services.admin: rating validation and not-found handling."""

import math
import unittest
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.services.admin import delete_user, list_users, parse_rating, update_rating


class TestParseRating(unittest.TestCase):
    def test_rounds_to_two_decimals(self) -> None:
        self.assertEqual(parse_rating(4.5), Decimal("4.50"))
        self.assertEqual(parse_rating(4.555), Decimal("4.56"))
        self.assertEqual(parse_rating(3), Decimal("3.00"))
        self.assertEqual(parse_rating(0), Decimal("0.00"))

    def test_numeric_string(self) -> None:
        self.assertEqual(parse_rating("2.25"), Decimal("2.25"))

    def test_rejects_invalid(self) -> None:
        for value in (-1, -0.01, math.nan, math.inf, "abc", None, True, [1], "1e400", 10**400):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    parse_rating(value)

    def test_rejects_too_large(self) -> None:
        with self.assertRaises(ValidationError):
            parse_rating(1e12)
        with self.assertRaises(ValidationError):
            parse_rating(1e30)


class TestUpdateRating(unittest.TestCase):
    def test_negative_is_validation_error_before_lookup(self) -> None:
        session = MagicMock()
        with self.assertRaises(ValidationError):
            update_rating(session, 1, -1)
        session.get.assert_not_called()

    def test_missing_user(self) -> None:
        session = MagicMock()
        session.get.return_value = None
        with self.assertRaises(NotFoundError):
            update_rating(session, 99, 4.5)
        session.commit.assert_not_called()

    def test_persists_rounded_value(self) -> None:
        user = SimpleNamespace(id=1, name="alice", rating=Decimal("0"))
        session = MagicMock()
        session.get.return_value = user
        record = update_rating(session, 1, 4.5)
        self.assertEqual(user.rating, Decimal("4.50"))
        session.commit.assert_called_once()
        self.assertEqual(record.rating, 4.5)
        self.assertIsInstance(record.rating, float)


class TestListUsers(unittest.TestCase):
    def test_normalizes_string_and_decimal_ratings(self) -> None:
        session = MagicMock()
        session.query.return_value.order_by.return_value.all.return_value = [
            SimpleNamespace(id=1, name="a", rating=Decimal("1.50")),
            SimpleNamespace(id=2, name="b", rating="2.25"),
        ]
        records = list_users(session)
        self.assertEqual([r.rating for r in records], [1.5, 2.25])


class TestDeleteUser(unittest.TestCase):
    def test_missing_user(self) -> None:
        session = MagicMock()
        session.query.return_value.filter.return_value.delete.return_value = 0
        with self.assertRaises(NotFoundError):
            delete_user(session, 5)
        session.commit.assert_not_called()

    def test_foreign_key_violation_conflicts(self) -> None:
        session = MagicMock()
        orig = Exception("still referenced")
        orig.pgcode = "23503"
        session.query.return_value.filter.return_value.delete.side_effect = IntegrityError(
            "DELETE", {}, orig
        )
        with self.assertRaises(ConflictError):
            delete_user(session, 5)
        session.rollback.assert_called_once()


if __name__ == "__main__":
    unittest.main()
