"""Catalog API client.

A thin wrapper around the users and products routes using the
``requests`` library.  Every method returns a tuple ``(data, error)``:
``data`` holds the decoded JSON body on success and ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for
listings) and ``error`` is a dictionary with ``status_code`` and
``message`` keys.  Nothing is raised for HTTP or connection errors, so
callers branch on ``error`` the same way the service's stores return
``(value, error)`` results.

The session is injectable: anything with a ``requests.Session``‑style
``request(method, url, **kwargs)`` method will do.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CatalogClient:
    """Client for the catalog service."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        api_key: Optional[str] = None,
        session: Optional[Any] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:3000``.
            api_prefix: Path under which the resource routes are mounted.
            api_key: Optional token sent as ``Authorization: Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against ``base_url + path``.

        Returns ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method,
                url,
                params=params or None,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            try:
                err_json = response.json()
                message = err_json.get("message") or err_json.get("detail") or str(err_json)
            except ValueError:
                message = response.text
            message = message or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    def _api(self, path: str) -> str:
        return f"{self.api_prefix}{path}"

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", self._api(path), params=params)
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/health")

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self, role: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/users/", {"role": role})

    def list_active_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/users/active")

    def get_user(self, user_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._api(f"/users/{user_id}"))

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._api("/users/"), json_body=payload)

    def update_user(self, user_id: str, changes: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", self._api(f"/users/{user_id}"), json_body=changes)

    def delete_user(self, user_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", self._api(f"/users/{user_id}"))
        return error is None, error

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/products/", {"category": category, "search": search})

    def list_available_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/products/available")

    def get_product(self, product_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", self._api(f"/products/{product_id}"))

    def create_product(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", self._api("/products/"), json_body=payload)

    def update_product(
        self, product_id: str, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", self._api(f"/products/{product_id}"), json_body=changes)

    def adjust_stock(self, product_id: str, quantity: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add ``quantity`` to a product's stock; negative values consume it."""
        return self._request("PATCH", self._api(f"/products/{product_id}/stock"), json_body={"quantity": quantity})

    def delete_product(self, product_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", self._api(f"/products/{product_id}"))
        return error is None, error
