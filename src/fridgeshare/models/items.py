"""Fridge item, category and claim summary payloads."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional

from pydantic import field_validator

from fridgeshare.db.models import ClaimStatus, ItemStatus
from fridgeshare.models.base import ApiModel, RowId
from fridgeshare.models.users import PublicUser


class Category(ApiModel):
    id: int
    name: str


class ClaimSummary(ApiModel):
    """Claim row without joined relations."""

    id: int
    item_id: int
    claimer_id: int
    status: ClaimStatus
    created_at: datetime
    decided_at: Optional[datetime] = None


class FoodItem(ApiModel):
    """Fridge item; relation fields are populated only where a listing joins them."""

    id: int
    title: str
    status: ItemStatus
    expires_at: Optional[datetime] = None
    owner_id: int
    category_id: Optional[int] = None
    created_at: datetime
    category: Optional[Category] = None
    owner: Optional[PublicUser] = None
    claims: Optional[list[ClaimSummary]] = None


class ItemCreateRequest(ApiModel):
    title: Optional[str] = None
    category_id: Optional[RowId] = None
    expires_at: Optional[datetime] = None

    @field_validator("category_id", mode="before")
    @classmethod
    def blank_category_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("expires_at", mode="before")
    @classmethod
    def parse_expiry(cls, value: Any) -> Any:
        """Accept blank values and bare dates (``2025-01-31``) from form inputs."""
        if value is None:
            return None
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            try:
                parsed = date.fromisoformat(value)
            except ValueError:
                return value
            return datetime(parsed.year, parsed.month, parsed.day)
        return value

    @field_validator("expires_at")
    @classmethod
    def normalize_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class ItemStatusUpdateRequest(ApiModel):
    status: Optional[str] = None


__all__ = [
    "Category",
    "ClaimSummary",
    "FoodItem",
    "ItemCreateRequest",
    "ItemStatusUpdateRequest",
]
