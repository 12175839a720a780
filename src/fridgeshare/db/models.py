"""SQLAlchemy models representing FridgeShare persistence tables."""

from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import (
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def utcnow() -> datetime:
    """Naive UTC timestamp, the representation stored in every DateTime column."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


class ItemStatus(str, enum.Enum):
    IN_FRIDGE = "IN_FRIDGE"
    AVAILABLE = "AVAILABLE"
    CLAIMED = "CLAIMED"


class ClaimStatus(str, enum.Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class Base(DeclarativeBase):
    """Declarative base class for FridgeShare ORM models."""


class UserORM(Base):
    """Registered account. The password hash never leaves the data layer."""

    __tablename__ = "User"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(
        "passwordHash", String(255), nullable=False, default=""
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    items: Mapped[List["FoodItemORM"]] = relationship(back_populates="owner")
    owned_groups: Mapped[List["FriendGroupORM"]] = relationship(back_populates="owner")


class FoodCategoryORM(Base):
    __tablename__ = "FoodCategory"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)


class FoodItemORM(Base):
    """Item sitting in a user's fridge, possibly released for others to claim."""

    __tablename__ = "FoodItem"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[ItemStatus] = mapped_column(
        Enum(ItemStatus, native_enum=False, length=16),
        nullable=False,
        default=ItemStatus.IN_FRIDGE,
    )
    expires_at: Mapped[Optional[datetime]] = mapped_column("expiresAt", DateTime, nullable=True)
    owner_id: Mapped[int] = mapped_column("ownerId", ForeignKey("User.id"), nullable=False)
    category_id: Mapped[Optional[int]] = mapped_column(
        "categoryId", ForeignKey("FoodCategory.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    owner: Mapped[UserORM] = relationship(back_populates="items")
    category: Mapped[Optional[FoodCategoryORM]] = relationship()
    claims: Mapped[List["ClaimORM"]] = relationship(
        back_populates="item", order_by="ClaimORM.id"
    )

    __table_args__ = (UniqueConstraint("id", "ownerId", name="FoodItem_id_ownerId_key"),)


class FriendGroupORM(Base):
    __tablename__ = "FriendGroup"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    owner_id: Mapped[int] = mapped_column("ownerId", ForeignKey("User.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    owner: Mapped[UserORM] = relationship(back_populates="owned_groups")
    members: Mapped[List["GroupMemberORM"]] = relationship(
        back_populates="group", order_by="GroupMemberORM.id"
    )


class GroupMemberORM(Base):
    __tablename__ = "GroupMember"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    group_id: Mapped[int] = mapped_column("groupId", ForeignKey("FriendGroup.id"), nullable=False)
    user_id: Mapped[int] = mapped_column("userId", ForeignKey("User.id"), nullable=False)
    tag: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    group: Mapped[FriendGroupORM] = relationship(back_populates="members")
    user: Mapped[UserORM] = relationship()

    __table_args__ = (
        UniqueConstraint("groupId", "userId", name="GroupMember_groupId_userId_key"),
    )


class ClaimORM(Base):
    """Request by one user to take another user's available item."""

    __tablename__ = "Claim"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column("itemId", ForeignKey("FoodItem.id"), nullable=False)
    claimer_id: Mapped[int] = mapped_column("claimerId", ForeignKey("User.id"), nullable=False)
    status: Mapped[ClaimStatus] = mapped_column(
        Enum(ClaimStatus, native_enum=False, length=16),
        nullable=False,
        default=ClaimStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)
    decided_at: Mapped[Optional[datetime]] = mapped_column("decidedAt", DateTime, nullable=True)

    item: Mapped[FoodItemORM] = relationship(back_populates="claims")
    claimer: Mapped[UserORM] = relationship()


class GroupShareORM(Base):
    __tablename__ = "GroupShare"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column("itemId", ForeignKey("FoodItem.id"), nullable=False)
    group_id: Mapped[int] = mapped_column("groupId", ForeignKey("FriendGroup.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    item: Mapped[FoodItemORM] = relationship()

    __table_args__ = (UniqueConstraint("itemId", "groupId", name="GroupShare_itemId_groupId_key"),)


class GroupMessageORM(Base):
    __tablename__ = "GroupMessage"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    group_id: Mapped[int] = mapped_column("groupId", ForeignKey("FriendGroup.id"), nullable=False)
    author_id: Mapped[int] = mapped_column("authorId", ForeignKey("User.id"), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)

    author: Mapped[UserORM] = relationship()


class DonationORM(Base):
    """Legacy quick-share board entry, unrelated to accounts."""

    __tablename__ = "donations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, nullable=False)


__all__ = [
    "Base",
    "ItemStatus",
    "ClaimStatus",
    "UserORM",
    "FoodCategoryORM",
    "FoodItemORM",
    "FriendGroupORM",
    "GroupMemberORM",
    "ClaimORM",
    "GroupShareORM",
    "GroupMessageORM",
    "DonationORM",
    "utcnow",
]
