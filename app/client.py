"""HTTP client that holds the issued bearer token and decides where the UI should land."""

from __future__ import annotations

from typing import Any

import httpx
import jwt

LOGIN_ROUTE = "/"
MEMBER_ROUTE = "/dash"
ADMIN_ROUTE = "/admindash"


class ClientError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class LendingClient:
    """
    Session holder for the lending API.

    Logging in stores the token; later calls send it as a Bearer header.
    The role is read from the token's claims without verifying the
    signature (only the server can do that); it is used for routing only.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)
        self.token: str | None = None
        self.user_id: int | None = None

    def __enter__(self) -> LendingClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    @property
    def role(self) -> str | None:
        if self.token is None:
            return None
        try:
            claims = jwt.decode(self.token, options={"verify_signature": False})
        except jwt.PyJWTError:
            return None
        return claims.get("role") or "member"

    def landing_route(self) -> str:
        """Login page without a token, admin console for admins, dashboard otherwise."""
        role = self.role
        if role is None:
            return LOGIN_ROUTE
        if role == "admin":
            return ADMIN_ROUTE
        return MEMBER_ROUTE

    def auth_headers(self) -> dict[str, str]:
        if self.token is None:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def logout(self) -> None:
        self.token = None
        self.user_id = None

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        resp = self._http.request(method, url, headers=self.auth_headers(), **kwargs)
        if resp.status_code >= 400:
            try:
                detail = resp.json().get("error") or resp.text
            except (ValueError, AttributeError):
                detail = resp.text
            raise ClientError(detail or f"HTTP {resp.status_code}", resp.status_code)
        return resp.json()

    def register(self, name: str, password: str) -> int:
        data = self._request("POST", "/auth/register", json={"name": name, "password": password})
        return data["userid"]

    def login(self, name: str, password: str) -> str:
        return self._store(self._request("POST", "/auth/login", json={"name": name, "password": password}))

    def admin_login(self, name: str, password: str) -> str:
        return self._store(self._request("POST", "/admin/login", json={"name": name, "password": password}))

    def _store(self, data: dict[str, Any]) -> str:
        self.token = data["token"]
        self.user_id = data["userid"]
        return self.token

    def list_users(self) -> list[dict[str, Any]]:
        return self._request("GET", "/admin/users")

    def update_rating(self, user_id: int, new_rating: float) -> dict[str, Any]:
        data = self._request("PUT", f"/admin/users/{user_id}/rating", json={"newRating": new_rating})
        return data["user"]

    def delete_user(self, user_id: int) -> None:
        self._request("DELETE", f"/admin/users/{user_id}")
