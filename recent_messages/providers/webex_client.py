from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx


logger = logging.getLogger(__name__)


@dataclass
class ApiResponse:
    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class WebexClient:
    """HTTP client for the Webex REST API."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: int = 30,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the Webex client.

        Args:
            base_url: API root (e.g., https://webexapis.com/v1)
            token: Bearer access token sent on every request
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub the network in tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.Client(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        throw_http_errors: bool = True,
    ) -> ApiResponse:
        """GET a resource. Raises on non-2xx unless throw_http_errors is False."""
        try:
            response = self.client.get(path, params=params)
            if throw_http_errors:
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Webex HTTP error for %s: %s", path, e)
            raise
        logger.debug("GET %s -> %s", path, response.status_code)
        return ApiResponse(status_code=response.status_code, body=self._decode(response))

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            return {"message": response.text}

    def list_rooms(self) -> ApiResponse:
        return self.get("/rooms", throw_http_errors=False)

    def list_messages(self, room_id: str) -> ApiResponse:
        return self.get("/messages", params={"roomId": room_id}, throw_http_errors=False)

    def get_me(self) -> ApiResponse:
        return self.get("/people/me", throw_http_errors=False)

    def get_person(self, person_id: str) -> ApiResponse:
        return self.get(f"/people/{person_id}", throw_http_errors=False)

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
