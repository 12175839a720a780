"""Legacy donation board data access helpers."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from fridgeshare.errors import BadRequestError
from fridgeshare.models.donations import Donation

from .models import DonationORM


def _to_model(row: DonationORM) -> Donation:
    return Donation(
        id=row.id,
        item=row.item,
        quantity=row.quantity,
        location=row.location,
        created_at=row.created_at,
    )


def list_donations(session: Session) -> List[Donation]:
    rows = (
        session.execute(
            select(DonationORM).order_by(DonationORM.created_at.desc(), DonationORM.id.desc())
        )
        .scalars()
        .all()
    )
    return [_to_model(row) for row in rows]


def create_donation(
    session: Session,
    *,
    item: Optional[str],
    quantity: Optional[str],
    location: Optional[str],
) -> Donation:
    if not item or not quantity or not location:
        raise BadRequestError("item, quantity, and location are required")

    row = DonationORM(item=item, quantity=quantity, location=location)
    session.add(row)
    session.flush()
    return _to_model(row)


__all__ = ["list_donations", "create_donation"]
