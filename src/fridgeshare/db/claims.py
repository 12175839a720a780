"""Claim data access helpers."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from fridgeshare.errors import BadRequestError, ConflictError, ForbiddenError
from fridgeshare.models.claims import Claim
from fridgeshare.models.users import PublicUser

from .items import to_item_model
from .models import ClaimORM, ClaimStatus, FoodItemORM, ItemStatus, utcnow

logger = logging.getLogger(__name__)

DECISIONS = (ClaimStatus.ACCEPTED, ClaimStatus.REJECTED)


def _to_model(row: ClaimORM, *, with_item: bool = False, with_claimer: bool = False) -> Claim:
    payload: dict[str, object] = {
        "id": row.id,
        "item_id": row.item_id,
        "claimer_id": row.claimer_id,
        "status": row.status,
        "created_at": row.created_at,
        "decided_at": row.decided_at,
    }
    if with_item:
        payload["item"] = to_item_model(row.item)
    if with_claimer:
        claimer = row.claimer
        payload["claimer"] = PublicUser(id=claimer.id, name=claimer.name, email=claimer.email)
    return Claim(**payload)


def create_claim(session: Session, *, claimer_id: int, item_id: Optional[int]) -> Claim:
    """Open a PENDING claim on someone else's AVAILABLE item.

    Several pending claims may exist for one item; the owner settles them
    through :func:`decide_claim`.
    """

    if item_id is None:
        raise BadRequestError("itemId required")

    item = session.get(FoodItemORM, item_id)
    if item is None or item.status != ItemStatus.AVAILABLE:
        raise BadRequestError("Item not available")
    if item.owner_id == claimer_id:
        raise BadRequestError("Cannot claim own item")

    row = ClaimORM(item_id=item.id, claimer_id=claimer_id, status=ClaimStatus.PENDING)
    session.add(row)
    session.flush()
    logger.info("Claim id=%s opened on item id=%s by user id=%s", row.id, item.id, claimer_id)
    return _to_model(row, with_claimer=True)


def list_owner_claims(session: Session, *, owner_id: int) -> List[Claim]:
    """Claims on items the user owns, newest first."""

    rows = (
        session.execute(
            select(ClaimORM)
            .join(ClaimORM.item)
            .where(FoodItemORM.owner_id == owner_id)
            .options(selectinload(ClaimORM.item), selectinload(ClaimORM.claimer))
            .order_by(ClaimORM.created_at.desc(), ClaimORM.id.desc())
        )
        .scalars()
        .all()
    )
    return [_to_model(row, with_item=True, with_claimer=True) for row in rows]


def list_my_claims(session: Session, *, claimer_id: int) -> List[Claim]:
    rows = (
        session.execute(
            select(ClaimORM)
            .where(ClaimORM.claimer_id == claimer_id)
            .options(selectinload(ClaimORM.item))
            .order_by(ClaimORM.created_at.desc(), ClaimORM.id.desc())
        )
        .scalars()
        .all()
    )
    return [_to_model(row, with_item=True) for row in rows]


def parse_decision(value: Optional[str]) -> ClaimStatus:
    try:
        decision = ClaimStatus(value)
    except ValueError:
        decision = None
    if decision not in DECISIONS:
        raise BadRequestError("decision must be ACCEPTED or REJECTED")
    return decision


def decide_claim(
    session: Session, *, owner_id: int, claim_id: int, decision: Optional[str]
) -> Claim:
    """Record the item owner's decision on a claim.

    Only PENDING claims can be decided, and a claim can only be accepted
    while its item is still AVAILABLE. Accepting also marks the item
    CLAIMED. Both rows change inside the caller's transaction, so they are
    committed or rolled back together.
    """

    status = parse_decision(decision)

    row = session.execute(
        select(ClaimORM).where(ClaimORM.id == claim_id).options(selectinload(ClaimORM.item))
    ).scalar_one_or_none()
    if row is None or row.item.owner_id != owner_id:
        raise ForbiddenError()
    if row.status is not ClaimStatus.PENDING:
        raise ConflictError("Claim already decided")
    if status is ClaimStatus.ACCEPTED and row.item.status is not ItemStatus.AVAILABLE:
        raise BadRequestError("Item not available")

    row.status = status
    row.decided_at = utcnow()
    if status is ClaimStatus.ACCEPTED:
        row.item.status = ItemStatus.CLAIMED
    session.flush()

    logger.info(
        "Claim id=%s %s by owner id=%s (item id=%s)",
        row.id,
        status.value,
        owner_id,
        row.item_id,
    )
    return _to_model(row, with_item=True, with_claimer=True)


__all__ = [
    "create_claim",
    "list_owner_claims",
    "list_my_claims",
    "parse_decision",
    "decide_claim",
]
