"""Redis-backed key-value store for evaluated ideas.

Keys: ideanest:idea:{idea_id}
Values: JSON-serialized IdeaRecord (camelCase wire shape)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import redis
import structlog

from ideanest.models.idea import IdeaRecord

if TYPE_CHECKING:
    from ideanest.config import Settings

logger = structlog.get_logger()


class IdeaStore:
    """Stores one IdeaRecord per generated idea id."""

    _PREFIX = "ideanest:idea"

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> IdeaStore | None:
        """Build a store from settings, or None when no Redis URL is configured."""
        if not settings.redis_url:
            return None
        return cls(
            redis.Redis.from_url(
                settings.redis_url,
                decode_responses=True,
                socket_connect_timeout=settings.redis_timeout,
                socket_timeout=settings.redis_timeout,
            )
        )

    def _make_key(self, idea_id: str) -> str:
        return f"{self._PREFIX}:{idea_id}"

    def save(self, idea_id: str, record: IdeaRecord) -> None:
        self._client.set(self._make_key(idea_id), record.model_dump_json(by_alias=True))
        logger.debug("idea_saved", idea_id=idea_id)

    def get(self, idea_id: str) -> IdeaRecord | None:
        # redis-py stubs: .get() returns bytes|str|None depending on decode_responses
        raw = cast("str | None", self._client.get(self._make_key(idea_id)))
        if raw is None:
            return None
        return IdeaRecord.model_validate_json(raw)

    def list_ids(self) -> list[str]:
        """Return all stored idea ids, sorted (ids sort by creation time)."""
        ids: list[str] = []
        cursor: int = 0
        while True:
            scan_result = cast(
                "tuple[int, list[str]]",
                self._client.scan(cursor, match=f"{self._PREFIX}:*", count=100),
            )
            cursor, keys = scan_result
            ids.extend(str(key).split(":", 2)[2] for key in keys)
            if cursor == 0:
                break
        return sorted(ids)

    def ping(self) -> bool:
        """Check Redis connectivity."""
        try:
            return bool(self._client.ping())
        except redis.ConnectionError:
            return False
