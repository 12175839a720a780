"""Group chat data access helpers."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from fridgeshare.errors import BadRequestError
from fridgeshare.models.groups import GroupMessage
from fridgeshare.models.users import PublicUser

from .groups import require_group_access
from .models import GroupMessageORM, UserORM

logger = logging.getLogger(__name__)

MESSAGE_HISTORY_LIMIT = 200


def _to_model(row: GroupMessageORM) -> GroupMessage:
    author: UserORM = row.author
    return GroupMessage(
        id=row.id,
        group_id=row.group_id,
        author_id=row.author_id,
        content=row.content,
        created_at=row.created_at,
        author=PublicUser(id=author.id, name=author.name, email=author.email),
    )


def post_message(
    session: Session, *, user_id: int, group_id: int, content: Optional[str]
) -> GroupMessage:
    cleaned = (content or "").strip()
    if not cleaned:
        raise BadRequestError("content required")

    require_group_access(session, group_id=group_id, user_id=user_id)

    row = GroupMessageORM(group_id=group_id, author_id=user_id, content=cleaned)
    session.add(row)
    session.flush()
    logger.debug("Posted message id=%s in group id=%s", row.id, group_id)
    return _to_model(row)


def list_messages(
    session: Session,
    *,
    user_id: int,
    group_id: int,
    limit: int = MESSAGE_HISTORY_LIMIT,
) -> List[GroupMessage]:
    """Latest ``limit`` messages of a group in reading order (oldest first)."""

    require_group_access(session, group_id=group_id, user_id=user_id)

    rows = (
        session.execute(
            select(GroupMessageORM)
            .where(GroupMessageORM.group_id == group_id)
            .options(selectinload(GroupMessageORM.author))
            .order_by(GroupMessageORM.created_at.desc(), GroupMessageORM.id.desc())
            .limit(limit)
        )
        .scalars()
        .all()
    )
    return [_to_model(row) for row in reversed(rows)]


__all__ = ["MESSAGE_HISTORY_LIMIT", "post_message", "list_messages"]
