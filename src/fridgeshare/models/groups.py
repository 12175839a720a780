"""Friend group, membership, share and chat payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fridgeshare.models.base import ApiModel, RowId
from fridgeshare.models.users import PublicUser


class GroupMember(ApiModel):
    id: int
    group_id: int
    user_id: int
    tag: Optional[str] = None
    created_at: datetime
    user: Optional[PublicUser] = None


class FriendGroup(ApiModel):
    id: int
    name: str
    owner_id: int
    created_at: datetime
    owner: Optional[PublicUser] = None
    members: Optional[list[GroupMember]] = None


class GroupMessage(ApiModel):
    id: int
    group_id: int
    author_id: int
    content: str
    created_at: datetime
    author: Optional[PublicUser] = None


class GroupCreateRequest(ApiModel):
    name: Optional[str] = None


class MemberAddRequest(ApiModel):
    user_id: Optional[RowId] = None
    tag: Optional[str] = None


class GroupShareRequest(ApiModel):
    item_id: Optional[RowId] = None


class MessageCreateRequest(ApiModel):
    content: Optional[str] = None


class OkResponse(ApiModel):
    ok: bool = True


__all__ = [
    "GroupMember",
    "FriendGroup",
    "GroupMessage",
    "GroupCreateRequest",
    "MemberAddRequest",
    "GroupShareRequest",
    "MessageCreateRequest",
    "OkResponse",
]
