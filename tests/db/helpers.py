"""Helpers for building fixtures directly against the data layer."""

from __future__ import annotations

from sqlalchemy.orm import Session

from fridgeshare.db.items import create_item, set_item_status
from fridgeshare.db.users import register_user
from fridgeshare.models.items import FoodItem
from fridgeshare.models.users import PublicUser


def make_user(session: Session, name: str, email: str | None = None) -> PublicUser:
    return register_user(
        session,
        name=name,
        email=email or f"{name.lower()}@example.com",
        password="pa55word",
    )


def make_available_item(session: Session, owner: PublicUser, title: str = "Milk") -> FoodItem:
    item = create_item(session, owner_id=owner.id, title=title)
    return set_item_status(session, owner_id=owner.id, item_id=item.id, status="AVAILABLE")
