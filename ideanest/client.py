"""HTTP client for the remote idea evaluation service.

All endpoints take a JSON body and answer with JSON. Every request carries
the configured bearer credential. Errors come back as
``{"error": str, "details"?: str}`` with a non-2xx status.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx
import structlog

from ideanest.metrics import remote_request_seconds

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from ideanest.config import Settings

logger = structlog.get_logger()


@dataclass(frozen=True)
class ServiceReply:
    """Status code and decoded JSON body of one service response."""

    status_code: int
    body: dict[str, object] = field(default_factory=dict)
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def error_message(self) -> str:
        """Best-effort error text: ``error`` field, nested ``error.message``, or raw text."""
        error = self.body.get("error")
        if isinstance(error, dict):
            error = error.get("message")
        if isinstance(error, str) and error:
            return error
        return self.text

    @property
    def details(self) -> str:
        details = self.body.get("details")
        return details if isinstance(details, str) else ""


def _decode(resp: httpx.Response) -> ServiceReply:
    try:
        data = resp.json()
    except ValueError:
        if resp.is_success:
            # Nothing usable came back; the caller treats this like a dropped connection.
            raise
        return ServiceReply(status_code=resp.status_code, text=resp.text)
    body: dict[str, object] = data if isinstance(data, dict) else {}
    return ServiceReply(status_code=resp.status_code, body=body, text=resp.text)


class EvaluationServiceClient:
    """Async client for the evaluation service, built on httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> EvaluationServiceClient:
        return cls(
            base_url=settings.api_base_url,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
        )

    async def post(self, path: str, payload: Mapping[str, str]) -> ServiceReply:
        """POST *payload* to *path* and decode the reply.

        Raises httpx.HTTPError on transport failures and ValueError when a
        2xx response body is not valid JSON.
        """
        started = time.perf_counter()
        try:
            resp = await self._client.post(path, json=dict(payload))
        finally:
            remote_request_seconds.labels(endpoint=path).observe(time.perf_counter() - started)
        logger.debug("service_response", path=path, status=resp.status_code)
        return _decode(resp)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> EvaluationServiceClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
