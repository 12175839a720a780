"""Fridge item data access helpers."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from fridgeshare.errors import BadRequestError, NotFoundError
from fridgeshare.models.items import Category, ClaimSummary, FoodItem
from fridgeshare.models.users import PublicUser

from .categories import category_exists, ensure_default_categories
from .models import FoodItemORM, ItemStatus, utcnow

logger = logging.getLogger(__name__)

DEFAULT_EXPIRING_DAYS = 3
# A century either way keeps the window inside the datetime range.
MAX_EXPIRING_DAYS = 36500


def to_item_model(
    row: FoodItemORM,
    *,
    with_category: bool = False,
    with_owner: bool = False,
    with_claims: bool = False,
) -> FoodItem:
    """Convert an ORM row, attaching only the relations the caller asked for."""

    payload: dict[str, object] = {
        "id": row.id,
        "title": row.title,
        "status": row.status,
        "expires_at": row.expires_at,
        "owner_id": row.owner_id,
        "category_id": row.category_id,
        "created_at": row.created_at,
    }
    if with_category and row.category is not None:
        payload["category"] = Category(id=row.category.id, name=row.category.name)
    if with_owner:
        payload["owner"] = PublicUser(id=row.owner.id, name=row.owner.name, email=row.owner.email)
    if with_claims:
        payload["claims"] = [
            ClaimSummary(
                id=claim.id,
                item_id=claim.item_id,
                claimer_id=claim.claimer_id,
                status=claim.status,
                created_at=claim.created_at,
                decided_at=claim.decided_at,
            )
            for claim in row.claims
        ]
    return FoodItem(**payload)


def parse_status(value: Optional[str]) -> ItemStatus:
    try:
        return ItemStatus(value)
    except ValueError as exc:
        raise BadRequestError("invalid status") from exc


def create_item(
    session: Session,
    *,
    owner_id: int,
    title: Optional[str],
    category_id: Optional[int] = None,
    expires_at: Optional[datetime] = None,
) -> FoodItem:
    """Put a new item in the owner's fridge (status IN_FRIDGE)."""

    cleaned_title = (title or "").strip()
    if not cleaned_title:
        raise BadRequestError("title is required")

    ensure_default_categories(session)
    if category_id is not None and not category_exists(session, category_id):
        raise BadRequestError("categoryId does not reference a category")

    row = FoodItemORM(
        title=cleaned_title,
        status=ItemStatus.IN_FRIDGE,
        owner_id=owner_id,
        category_id=category_id,
        expires_at=expires_at,
    )
    session.add(row)
    session.flush()
    logger.info("Created item id=%s owner=%s", row.id, owner_id)
    return to_item_model(row, with_category=True)


def list_items(session: Session, *, owner_id: int) -> List[FoodItem]:
    rows = (
        session.execute(
            select(FoodItemORM)
            .where(FoodItemORM.owner_id == owner_id)
            .options(selectinload(FoodItemORM.category), selectinload(FoodItemORM.claims))
            .order_by(FoodItemORM.created_at.desc(), FoodItemORM.id.desc())
        )
        .scalars()
        .all()
    )
    return [to_item_model(row, with_category=True, with_claims=True) for row in rows]


def set_item_status(
    session: Session, *, owner_id: int, item_id: int, status: Optional[str]
) -> FoodItem:
    """Change the status of one of the caller's items.

    The lookup matches on (id, owner) so other users' items look missing.
    """

    new_status = parse_status(status)
    row = session.execute(
        select(FoodItemORM).where(FoodItemORM.id == item_id, FoodItemORM.owner_id == owner_id)
    ).scalar_one_or_none()
    if row is None:
        raise NotFoundError("item not found")

    row.status = new_status
    session.flush()
    logger.info("Item id=%s status -> %s", item_id, new_status.value)
    return to_item_model(row)


def list_expiring(
    session: Session,
    *,
    owner_id: int,
    days: int = DEFAULT_EXPIRING_DAYS,
    now: Optional[datetime] = None,
) -> List[FoodItem]:
    """IN_FRIDGE items expiring within ``days``, soonest first."""

    if not -MAX_EXPIRING_DAYS <= days <= MAX_EXPIRING_DAYS:
        raise BadRequestError("days out of range")
    until = (now or utcnow()) + timedelta(days=days)
    rows = (
        session.execute(
            select(FoodItemORM)
            .where(
                FoodItemORM.owner_id == owner_id,
                FoodItemORM.status == ItemStatus.IN_FRIDGE,
                FoodItemORM.expires_at.is_not(None),
                FoodItemORM.expires_at <= until,
            )
            .order_by(FoodItemORM.expires_at.asc(), FoodItemORM.id.asc())
        )
        .scalars()
        .all()
    )
    return [to_item_model(row) for row in rows]


def list_available(session: Session, *, caller_id: int) -> List[FoodItem]:
    """The claim pool: AVAILABLE items owned by someone other than the caller."""

    rows = (
        session.execute(
            select(FoodItemORM)
            .where(FoodItemORM.status == ItemStatus.AVAILABLE, FoodItemORM.owner_id != caller_id)
            .options(selectinload(FoodItemORM.owner), selectinload(FoodItemORM.category))
            .order_by(FoodItemORM.created_at.desc(), FoodItemORM.id.desc())
        )
        .scalars()
        .all()
    )
    return [to_item_model(row, with_category=True, with_owner=True) for row in rows]


__all__ = [
    "DEFAULT_EXPIRING_DAYS",
    "MAX_EXPIRING_DAYS",
    "to_item_model",
    "parse_status",
    "create_item",
    "list_items",
    "set_item_status",
    "list_expiring",
    "list_available",
]
