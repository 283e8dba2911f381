"""Unit tests for app.client.LendingClient using httpx.MockTransport."""

import json
import unittest

import httpx
from pydantic import SecretStr

from app.client import ADMIN_ROUTE, LOGIN_ROUTE, MEMBER_ROUTE, ClientError, LendingClient
from app.core.config import Settings
from app.core.security import create_access_token

SETTINGS = Settings(_env_file=None, JWT_SECRET=SecretStr("client-test-secret"))


def _client(handler) -> LendingClient:
    return LendingClient("http://testserver", transport=httpx.MockTransport(handler))


class TestLandingRoute(unittest.TestCase):
    def test_no_token_goes_to_login(self) -> None:
        client = _client(lambda request: httpx.Response(500))
        self.assertFalse(client.is_authenticated)
        self.assertEqual(client.landing_route(), LOGIN_ROUTE)
        self.assertEqual(client.auth_headers(), {})

    def test_member_login(self) -> None:
        token = create_access_token(5, "alice", SETTINGS)

        def handler(request: httpx.Request) -> httpx.Response:
            self.assertEqual(request.url.path, "/auth/login")
            self.assertEqual(json.loads(request.content), {"name": "alice", "password": "secret123"})
            return httpx.Response(200, json={"message": "Login successful", "userid": 5, "token": token})

        with _client(handler) as client:
            client.login("alice", "secret123")
            self.assertTrue(client.is_authenticated)
            self.assertEqual(client.user_id, 5)
            self.assertEqual(client.landing_route(), MEMBER_ROUTE)
            client.logout()
            self.assertEqual(client.landing_route(), LOGIN_ROUTE)

    def test_admin_login(self) -> None:
        token = create_access_token(1, "root", SETTINGS, role="admin")

        def handler(request: httpx.Request) -> httpx.Response:
            self.assertEqual(request.url.path, "/admin/login")
            return httpx.Response(200, json={"message": "Admin login successful", "userid": 1, "token": token})

        client = _client(handler)
        client.admin_login("root", "rootpass1")
        self.assertEqual(client.role, "admin")
        self.assertEqual(client.landing_route(), ADMIN_ROUTE)

    def test_garbage_token_is_treated_as_logged_out(self) -> None:
        client = _client(lambda request: httpx.Response(500))
        client.token = "garbage"
        self.assertEqual(client.landing_route(), LOGIN_ROUTE)


class TestAdminCalls(unittest.TestCase):
    def test_sends_bearer_and_parses_user(self) -> None:
        token = create_access_token(1, "root", SETTINGS, role="admin")
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if request.url.path == "/admin/login":
                return httpx.Response(200, json={"message": "ok", "userid": 1, "token": token})
            return httpx.Response(
                200,
                json={"message": "Rating updated", "user": {"id": 2, "name": "bob", "rating": 4.5}},
            )

        client = _client(handler)
        client.admin_login("root", "rootpass1")
        user = client.update_rating(2, 4.5)
        self.assertEqual(user["rating"], 4.5)
        self.assertEqual(seen[-1].method, "PUT")
        self.assertEqual(seen[-1].url.path, "/admin/users/2/rating")
        self.assertEqual(seen[-1].headers["Authorization"], f"Bearer {token}")
        self.assertEqual(json.loads(seen[-1].content), {"newRating": 4.5})

    def test_error_body_is_raised(self) -> None:
        client = _client(lambda request: httpx.Response(404, json={"error": "User not found"}))
        with self.assertRaises(ClientError) as ctx:
            client.delete_user(9)
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.message, "User not found")

    def test_register_returns_id(self) -> None:
        client = _client(
            lambda request: httpx.Response(201, json={"message": "User registered", "userid": 11})
        )
        self.assertEqual(client.register("carol", "pw123456"), 11)
        self.assertFalse(client.is_authenticated)


if __name__ == "__main__":
    unittest.main()
