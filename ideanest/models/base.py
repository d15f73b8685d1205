"""Base model for every payload exchanged with the evaluation service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Frozen model whose aliases follow the service's camelCase JSON keys.

    Fields are snake_case in Python; ``model_dump(by_alias=True)`` yields
    the wire shape and validation accepts either spelling.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)
