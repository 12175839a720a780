"""Legacy donation board endpoints (no authentication)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from fridgeshare.db.donations import create_donation, list_donations
from fridgeshare.models.donations import Donation, DonationCreateRequest
from fridgeshare.server.deps import get_db

router = APIRouter(prefix="/api/donations", tags=["donations"])


@router.get("", response_model=list[Donation], summary="List donations")
def donations_list(session: Session = Depends(get_db)) -> list[Donation]:
    return list_donations(session)


@router.post(
    "",
    response_model=Donation,
    status_code=status.HTTP_201_CREATED,
    summary="Post a donation",
)
def donations_create(
    payload: DonationCreateRequest,
    session: Session = Depends(get_db),
) -> Donation:
    return create_donation(
        session,
        item=payload.item,
        quantity=payload.quantity,
        location=payload.location,
    )
