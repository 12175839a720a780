"""Group item sharing data access helpers."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from fridgeshare.errors import BadRequestError, ForbiddenError
from fridgeshare.models.items import FoodItem

from .groups import require_group_access
from .items import to_item_model
from .models import FoodItemORM, GroupShareORM

logger = logging.getLogger(__name__)


def share_item_to_group(
    session: Session, *, user_id: int, group_id: int, item_id: Optional[int]
) -> bool:
    """Make one of the caller's items visible to a group they belong to.

    Sharing the same item twice leaves a single share row. The insert runs in
    a savepoint guarded by the (itemId, groupId) unique key, so a concurrent
    duplicate is absorbed instead of failing the request. Returns True when a
    new share was recorded.
    """

    if item_id is None:
        raise BadRequestError("itemId required")

    require_group_access(session, group_id=group_id, user_id=user_id)

    item = session.get(FoodItemORM, item_id)
    if item is None or item.owner_id != user_id:
        raise ForbiddenError("You can share only your own items")

    try:
        with session.begin_nested():
            session.add(GroupShareORM(item_id=item_id, group_id=group_id))
    except IntegrityError:
        logger.debug("Item id=%s already shared with group id=%s", item_id, group_id)
        return False

    logger.info("Shared item id=%s with group id=%s", item_id, group_id)
    return True


def list_group_items(session: Session, *, user_id: int, group_id: int) -> List[FoodItem]:
    """Items shared with the group, most recently shared first."""

    require_group_access(session, group_id=group_id, user_id=user_id)

    shares = (
        session.execute(
            select(GroupShareORM)
            .where(GroupShareORM.group_id == group_id)
            .options(
                selectinload(GroupShareORM.item).options(
                    selectinload(FoodItemORM.owner),
                    selectinload(FoodItemORM.category),
                ),
            )
            .order_by(GroupShareORM.created_at.desc(), GroupShareORM.id.desc())
        )
        .scalars()
        .all()
    )
    return [to_item_model(share.item, with_category=True, with_owner=True) for share in shares]


__all__ = ["share_item_to_group", "list_group_items"]
