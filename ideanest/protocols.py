"""Port interfaces (Protocols) the orchestrator depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ideanest.client import ServiceReply
    from ideanest.models.idea import IdeaRecord


@runtime_checkable
class EvaluationServicePort(Protocol):
    """Transport to the remote evaluation service.

    ``post`` returns the decoded reply for any HTTP status and raises only
    when no usable reply was received (connection errors, timeouts, a
    success body that is not JSON).
    """

    async def post(self, path: str, payload: Mapping[str, str]) -> ServiceReply: ...


@runtime_checkable
class IdeaStorePort(Protocol):
    """Key-value persistence for evaluated ideas."""

    def save(self, idea_id: str, record: IdeaRecord) -> None: ...
    def get(self, idea_id: str) -> IdeaRecord | None: ...
    def list_ids(self) -> list[str]: ...
