"""Base model for processed CI configuration objects."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class CiModel(BaseModel):
    """Immutable base model shared by all processed CI objects."""

    model_config = {"extra": "forbid", "populate_by_name": True, "frozen": True}

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
