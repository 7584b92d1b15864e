from __future__ import annotations

from typing import Any

import httpx
import structlog

logger = structlog.get_logger()

DEFAULT_USER_AGENT = "scopedash/0.1.0"
DEFAULT_API_PREFIX = "/vmturbo/rest"
SESSION_COOKIE_NAME = "JSESSIONID"


class ScopeDashAPIError(RuntimeError):
    """Raised when the management server cannot be reached or answers without JSON."""


class ManagementClient:
    """HTTP client for the management server's REST API.

    Requests are sent once; there is no retry. Error statuses that carry a
    JSON body are returned to the caller so the server's error envelope can
    be interpreted there.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_prefix: str = DEFAULT_API_PREFIX,
        session_cookie: str | None = None,
        timeout: float = 30.0,
        verify: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_prefix = "/" + api_prefix.strip("/") if api_prefix.strip("/") else ""
        self._session_cookie = session_cookie
        self._timeout = timeout
        self._verify = verify
        self._user_agent = user_agent

    @classmethod
    def from_settings(cls, settings: Any, **overrides: Any) -> "ManagementClient":
        options: dict[str, Any] = {
            "api_prefix": settings.api_prefix,
            "session_cookie": settings.session_cookie,
            "timeout": settings.http_timeout,
            "verify": settings.verify_ssl,
        }
        options.update({k: v for k, v in overrides.items() if v is not None})
        base_url = options.pop("base_url", settings.base_url)
        return cls(base_url, **options)

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self._user_agent,
        }

    def _cookies(self) -> dict[str, str]:
        if self._session_cookie:
            return {SESSION_COOKIE_NAME: self._session_cookie}
        return {}

    async def _request(self, method: str, path: str, *, json: Any = None) -> Any:
        url = f"{self._base_url}{self._api_prefix}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                verify=self._verify,
                cookies=self._cookies(),
            ) as client:
                response = await client.request(method, url, json=json, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.error("http_network_error", method=method, url=url, error=str(exc))
            raise ScopeDashAPIError(str(exc)) from exc

        if not response.content:
            if response.is_error:
                raise ScopeDashAPIError(f"HTTP {response.status_code} from {url}")
            return {}

        try:
            return response.json()
        except ValueError as exc:
            logger.error(
                "http_invalid_json",
                status=response.status_code,
                method=method,
                url=url,
            )
            raise ScopeDashAPIError(
                f"HTTP {response.status_code} from {url}: response is not JSON"
            ) from exc

    async def search(self, body: dict[str, Any]) -> list[dict[str, Any]]:
        """POST a search request; returns the list of matching entities."""
        data = await self._request("POST", "/search", json=body)
        if isinstance(data, list):
            return data
        if isinstance(data, dict) and "type" in data:
            raise ScopeDashAPIError(f"search failed ({data.get('type')}): {data.get('exception')}")
        return []

    async def create_widgetset(self, body: dict[str, Any]) -> Any:
        """POST a widgetset (dashboard) creation request; returns the decoded response."""
        return await self._request("POST", "/widgetsets", json=body)


__all__ = ["ManagementClient", "ScopeDashAPIError", "SESSION_COOKIE_NAME"]
