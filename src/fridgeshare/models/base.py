"""Shared pydantic configuration for API payloads."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Signed 64-bit range of an SQL INTEGER primary key.
ROW_ID_MIN = -(2**63)
ROW_ID_MAX = 2**63 - 1

RowId = Annotated[int, Field(ge=ROW_ID_MIN, le=ROW_ID_MAX)]


class ApiModel(BaseModel):
    """Base model serialized with camelCase keys (``ownerId``, ``expiresAt``...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


__all__ = ["ApiModel", "RowId", "ROW_ID_MIN", "ROW_ID_MAX"]
