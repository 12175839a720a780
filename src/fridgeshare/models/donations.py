"""Legacy donation board payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from pydantic import field_validator

from fridgeshare.models.base import ApiModel


class Donation(ApiModel):
    id: int
    item: str
    quantity: str
    location: str
    created_at: datetime


class DonationCreateRequest(ApiModel):
    item: Optional[str] = None
    quantity: Optional[Union[str, int, float]] = None
    location: Optional[str] = None

    @field_validator("quantity")
    @classmethod
    def stringify_quantity(cls, value: Optional[Union[str, int, float]]) -> Optional[str]:
        """Quantities are free text ("2 kg"), but numeric JSON is accepted too."""
        if value is None:
            return None
        return str(value)


__all__ = ["Donation", "DonationCreateRequest"]
