"""Friend group, membership, group sharing and group chat endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from fridgeshare import metrics
from fridgeshare.db.groups import add_member, create_group, get_group, list_groups
from fridgeshare.db.messages import list_messages, post_message
from fridgeshare.db.shares import list_group_items, share_item_to_group
from fridgeshare.models.groups import (
    FriendGroup,
    GroupCreateRequest,
    GroupMember,
    GroupMessage,
    GroupShareRequest,
    MemberAddRequest,
    MessageCreateRequest,
    OkResponse,
)
from fridgeshare.models.items import FoodItem
from fridgeshare.models.users import PublicUser
from fridgeshare.server.deps import RowIdPath, get_current_user, get_db

router = APIRouter(prefix="/api/groups", tags=["groups"])


@router.get("", response_model=list[FriendGroup], summary="Groups I own or belong to")
def groups_list(
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[FriendGroup]:
    return list_groups(session, user_id=user.id)


@router.post(
    "",
    response_model=FriendGroup,
    status_code=status.HTTP_201_CREATED,
    summary="Create a friend group",
)
def groups_create(
    payload: GroupCreateRequest,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> FriendGroup:
    return create_group(session, owner_id=user.id, name=payload.name)


@router.get("/{group_id}", response_model=FriendGroup, summary="Group details")
def groups_get(
    group_id: RowIdPath,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> FriendGroup:
    return get_group(session, group_id=group_id, user_id=user.id)


@router.post(
    "/{group_id}/members",
    response_model=GroupMember,
    status_code=status.HTTP_201_CREATED,
    summary="Add a member (owner only)",
)
def groups_add_member(
    group_id: RowIdPath,
    payload: MemberAddRequest,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> GroupMember:
    return add_member(
        session,
        owner_id=user.id,
        group_id=group_id,
        user_id=payload.user_id,
        tag=payload.tag,
    )


@router.get("/{group_id}/items", response_model=list[FoodItem], summary="Items shared with a group")
def groups_items(
    group_id: RowIdPath,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[FoodItem]:
    return list_group_items(session, user_id=user.id, group_id=group_id)


@router.post(
    "/{group_id}/share",
    response_model=OkResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Share one of my items with a group",
)
def groups_share_item(
    group_id: RowIdPath,
    payload: GroupShareRequest,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> OkResponse:
    share_item_to_group(session, user_id=user.id, group_id=group_id, item_id=payload.item_id)
    return OkResponse(ok=True)


@router.get(
    "/{group_id}/messages",
    response_model=list[GroupMessage],
    summary="Group chat history (oldest first)",
)
def groups_messages(
    group_id: RowIdPath,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[GroupMessage]:
    return list_messages(session, user_id=user.id, group_id=group_id)


@router.post(
    "/{group_id}/messages",
    response_model=GroupMessage,
    status_code=status.HTTP_201_CREATED,
    summary="Post to the group chat",
)
def groups_post_message(
    group_id: RowIdPath,
    payload: MessageCreateRequest,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> GroupMessage:
    message = post_message(session, user_id=user.id, group_id=group_id, content=payload.content)
    metrics.GROUP_MESSAGES.inc()
    return message
