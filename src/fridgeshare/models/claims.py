"""Claim payloads."""

from __future__ import annotations

from typing import Optional

from fridgeshare.models.base import ApiModel, RowId
from fridgeshare.models.items import ClaimSummary, FoodItem
from fridgeshare.models.users import PublicUser


class Claim(ClaimSummary):
    item: Optional[FoodItem] = None
    claimer: Optional[PublicUser] = None


class ClaimCreateRequest(ApiModel):
    item_id: Optional[RowId] = None


class ClaimDecisionRequest(ApiModel):
    decision: Optional[str] = None


class ShareLinkRequest(ApiModel):
    item_id: Optional[RowId] = None
    network: Optional[str] = None


class ShareLinkResponse(ApiModel):
    share_url: str
    note: str


__all__ = [
    "Claim",
    "ClaimCreateRequest",
    "ClaimDecisionRequest",
    "ShareLinkRequest",
    "ShareLinkResponse",
]
