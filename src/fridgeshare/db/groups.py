"""Friend group and membership data access helpers."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from fridgeshare.errors import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from fridgeshare.models.groups import FriendGroup, GroupMember
from fridgeshare.models.users import PublicUser

from .models import FriendGroupORM, GroupMemberORM, UserORM

logger = logging.getLogger(__name__)


def _public(row: UserORM) -> PublicUser:
    return PublicUser(id=row.id, name=row.name, email=row.email)


def _member_model(row: GroupMemberORM) -> GroupMember:
    return GroupMember(
        id=row.id,
        group_id=row.group_id,
        user_id=row.user_id,
        tag=row.tag,
        created_at=row.created_at,
        user=_public(row.user),
    )


def _group_model(row: FriendGroupORM, *, with_relations: bool = False) -> FriendGroup:
    payload: dict[str, object] = {
        "id": row.id,
        "name": row.name,
        "owner_id": row.owner_id,
        "created_at": row.created_at,
    }
    if with_relations:
        payload["owner"] = _public(row.owner)
        payload["members"] = [_member_model(member) for member in row.members]
    return FriendGroup(**payload)


def is_owner_or_member(group: FriendGroupORM, user_id: int) -> bool:
    """True when ``user_id`` owns the group or appears in its member list."""

    if group.owner_id == user_id:
        return True
    return any(member.user_id == user_id for member in group.members)


def require_group_access(session: Session, *, group_id: int, user_id: int) -> FriendGroupORM:
    """Load a group for an owner or member.

    Raises :class:`NotFoundError` if the group is missing and
    :class:`ForbiddenError` when the user neither owns nor belongs to it.
    """

    group = session.execute(
        select(FriendGroupORM)
        .where(FriendGroupORM.id == group_id)
        .options(
            selectinload(FriendGroupORM.members).selectinload(GroupMemberORM.user),
            selectinload(FriendGroupORM.owner),
        )
    ).scalar_one_or_none()
    if group is None:
        raise NotFoundError("group not found")
    if not is_owner_or_member(group, user_id):
        raise ForbiddenError()
    return group


def create_group(session: Session, *, owner_id: int, name: Optional[str]) -> FriendGroup:
    cleaned = (name or "").strip()
    if not cleaned:
        raise BadRequestError("name required")

    row = FriendGroupORM(name=cleaned, owner_id=owner_id)
    session.add(row)
    session.flush()
    logger.info("Created group id=%s owner=%s", row.id, owner_id)
    return _group_model(row)


def list_groups(session: Session, *, user_id: int) -> List[FriendGroup]:
    """Groups the user owns or belongs to, newest first, with owner and members."""

    membership = select(GroupMemberORM.group_id).where(GroupMemberORM.user_id == user_id)
    rows = (
        session.execute(
            select(FriendGroupORM)
            .where(or_(FriendGroupORM.owner_id == user_id, FriendGroupORM.id.in_(membership)))
            .options(
                selectinload(FriendGroupORM.members).selectinload(GroupMemberORM.user),
                selectinload(FriendGroupORM.owner),
            )
            .order_by(FriendGroupORM.created_at.desc(), FriendGroupORM.id.desc())
        )
        .scalars()
        .all()
    )
    return [_group_model(row, with_relations=True) for row in rows]


def get_group(session: Session, *, group_id: int, user_id: int) -> FriendGroup:
    group = require_group_access(session, group_id=group_id, user_id=user_id)
    return _group_model(group, with_relations=True)


def add_member(
    session: Session,
    *,
    owner_id: int,
    group_id: int,
    user_id: Optional[int],
    tag: Optional[str] = None,
) -> GroupMember:
    """Add ``user_id`` to a group. Only the group owner may do this."""

    if user_id is None:
        raise BadRequestError("userId required")

    group = session.execute(
        select(FriendGroupORM).where(
            FriendGroupORM.id == group_id, FriendGroupORM.owner_id == owner_id
        )
    ).scalar_one_or_none()
    if group is None:
        raise NotFoundError("group not found")

    friend = session.get(UserORM, user_id)
    if friend is None:
        raise NotFoundError("user not found")

    existing = session.execute(
        select(GroupMemberORM.id).where(
            GroupMemberORM.group_id == group_id, GroupMemberORM.user_id == friend.id
        )
    ).first()
    if existing:
        raise ConflictError("User already in group")

    cleaned_tag = (tag or "").strip() or None
    member = GroupMemberORM(group_id=group_id, user=friend, tag=cleaned_tag)
    session.add(member)
    try:
        session.flush()
    except IntegrityError as exc:
        raise ConflictError("User already in group") from exc

    logger.info("Added user id=%s to group id=%s", friend.id, group_id)
    return _member_model(member)


__all__ = [
    "is_owner_or_member",
    "require_group_access",
    "create_group",
    "list_groups",
    "get_group",
    "add_member",
]
