"""Roblox Open Cloud HTTP client.

Shared plumbing for the Roblox tool families:
  - authenticated (``x-api-key``) and public requests with response logging
  - long-running operation polling
  - asset ID extraction from upload responses

Non-2xx responses are returned to the caller, never retried. Network
failures (``httpx.TransportError``) propagate.
"""

from __future__ import annotations

import asyncio
import json
import re
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import httpx

from shared.errors import HttpStatusError
from shared.log import ToolLogger

ROBLOX_CLOUD_BASE = "https://apis.roblox.com"
THUMBNAILS_BASE = "https://thumbnails.roblox.com"

_ASSET_PATH_RE = re.compile(r"assets/(\d+)")
_ASSET_ID_RE = re.compile(r'"assetId"\s*:\s*"?(\d+)"?')


@dataclass
class RobloxResponse:
    """A completed HTTP exchange with a Roblox endpoint."""

    status: int
    body: str
    url: str
    duration_ms: int
    json: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def raise_for_status(self) -> None:
        if not self.ok:
            raise HttpStatusError(self.status, self.body, self.url)


@dataclass
class PollResult:
    """Outcome of polling a long-running operation."""

    done: bool
    response: Any = None
    error: str | None = None


class RobloxCloudClient:
    """Async client for Roblox Open Cloud and the public thumbnails API."""

    def __init__(
        self,
        api_key: Callable[[], str],
        logger: ToolLogger,
        *,
        base_url: str = ROBLOX_CLOUD_BASE,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self._api_key = api_key
        self.logger = logger
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self.sleep = sleep

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def headers(self) -> dict[str, str]:
        """Standard JSON headers; the key is read at call time."""
        return {
            "x-api-key": self._api_key(),
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        content: str | bytes | None = None,
        files: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        auth: bool = True,
    ) -> RobloxResponse:
        """Issue one request and capture status, body and timing.

        ``auth=False`` skips the API key (public endpoints such as thumbnails).
        """
        request_headers = dict(headers or {})
        if auth:
            if "x-api-key" not in request_headers:
                request_headers["x-api-key"] = self._api_key()
            # multipart bodies get their boundary header from httpx
            if files is None:
                request_headers.setdefault("Content-Type", "application/json")

        start = time.monotonic()
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.request(
                method,
                url,
                params=params,
                json=json_body,
                content=content,
                files=files,
                headers=request_headers,
            )
        duration_ms = int((time.monotonic() - start) * 1000)

        final_url = str(resp.url)
        self.logger.api_response(final_url, resp.status_code, duration_ms)

        try:
            parsed = resp.json() if resp.content else None
        except ValueError:
            parsed = None

        return RobloxResponse(
            status=resp.status_code,
            body=resp.text,
            url=final_url,
            duration_ms=duration_ms,
            json=parsed,
        )

    async def get(self, url: str, **kwargs: Any) -> RobloxResponse:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> RobloxResponse:
        return await self.request("POST", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> RobloxResponse:
        return await self.request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> RobloxResponse:
        return await self.request("DELETE", url, **kwargs)

    async def poll_operation(
        self,
        operation_path: str,
        max_attempts: int = 10,
        interval: float = 1.0,
    ) -> PollResult:
        """Poll a long-running operation until ``done`` or attempts run out.

        ``operation_path`` may be a full URL, a v1 path
        (``assets/v1/operations/<id>``) or a cloud v2 resource path.
        """
        clean = operation_path.lstrip("/")
        if clean.startswith("http"):
            url = clean
        elif "/v1/" in clean:
            url = f"{self.base_url}/{clean}"
        else:
            url = f"{self.base_url}/cloud/v2/{clean}"

        for attempt in range(max_attempts):
            res = await self.get(url)
            if not res.ok:
                return PollResult(done=True, error=f"Poll error {res.status}: {res.body}")

            body = res.json if isinstance(res.json, dict) else None
            if body and body.get("done"):
                return PollResult(done=True, response=body.get("response") or body)

            if attempt < max_attempts - 1:
                await self.sleep(interval)

        return PollResult(
            done=False,
            error=f"Operation timed out after {max_attempts} polling attempts",
        )


def extract_asset_id(body: str) -> str | None:
    """Find the asset ID in an Assets API create/operation response.

    Looks at ``assetId``, ``response.assetId``, a ``path`` of the form
    ``assets/<id>`` and finally a nested ``response`` of a done operation.
    Non-JSON bodies fall back to a regex search.
    """
    try:
        data = json.loads(body)
    except ValueError:
        match = _ASSET_ID_RE.search(body)
        return match.group(1) if match else None

    if not isinstance(data, dict):
        return None

    response = data.get("response") if isinstance(data.get("response"), dict) else {}

    if data.get("assetId"):
        return str(data["assetId"])
    if response.get("assetId"):
        return str(response["assetId"])

    path = response.get("path") or data.get("path")
    if isinstance(path, str):
        match = _ASSET_PATH_RE.search(path)
        if match:
            return match.group(1)

    if data.get("done") and response:
        return extract_asset_id(json.dumps(response))
    return None
