"""Fridge item endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from fridgeshare.db.items import (
    DEFAULT_EXPIRING_DAYS,
    MAX_EXPIRING_DAYS,
    create_item,
    list_available,
    list_expiring,
    list_items,
    set_item_status,
)
from fridgeshare.models.items import FoodItem, ItemCreateRequest, ItemStatusUpdateRequest
from fridgeshare.models.users import PublicUser
from fridgeshare.server.deps import RowIdPath, get_current_user, get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=list[FoodItem], summary="List my items")
def items_list(
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[FoodItem]:
    return list_items(session, owner_id=user.id)


@router.post(
    "",
    response_model=FoodItem,
    status_code=status.HTTP_201_CREATED,
    summary="Add an item to my fridge",
)
def items_create(
    payload: ItemCreateRequest,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> FoodItem:
    logger.debug("Creating item for user id=%s payload=%s", user.id, payload.model_dump())
    return create_item(
        session,
        owner_id=user.id,
        title=payload.title,
        category_id=payload.category_id,
        expires_at=payload.expires_at,
    )


@router.patch("/{item_id}/status", response_model=FoodItem, summary="Change item status")
def items_set_status(
    item_id: RowIdPath,
    payload: ItemStatusUpdateRequest,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> FoodItem:
    return set_item_status(session, owner_id=user.id, item_id=item_id, status=payload.status)


@router.get("/expiring", response_model=list[FoodItem], summary="Items expiring soon")
def items_expiring(
    days: int = Query(
        default=DEFAULT_EXPIRING_DAYS, ge=-MAX_EXPIRING_DAYS, le=MAX_EXPIRING_DAYS
    ),
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[FoodItem]:
    return list_expiring(session, owner_id=user.id, days=days)


@router.get("/available", response_model=list[FoodItem], summary="Items others can claim")
def items_available(
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[FoodItem]:
    return list_available(session, caller_id=user.id)
