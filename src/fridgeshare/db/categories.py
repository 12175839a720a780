"""Food category data access helpers."""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from fridgeshare.models.items import Category

from .models import FoodCategoryORM

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ("Lactate", "Legume", "Fructe", "Carne", "Conserve", "Băuturi")


def _to_model(row: FoodCategoryORM) -> Category:
    return Category(id=row.id, name=row.name)


def ensure_default_categories(session: Session) -> int:
    """Insert whichever default categories are missing; returns how many were added."""

    existing = set(
        session.execute(
            select(FoodCategoryORM.name).where(FoodCategoryORM.name.in_(DEFAULT_CATEGORIES))
        )
        .scalars()
        .all()
    )
    missing = [name for name in DEFAULT_CATEGORIES if name not in existing]
    if not missing:
        return 0

    session.add_all(FoodCategoryORM(name=name) for name in missing)
    session.flush()
    logger.info("Seeded %s default food categories", len(missing))
    return len(missing)


def list_categories(session: Session) -> List[Category]:
    """Return every category ordered by name, seeding the defaults on first use."""

    ensure_default_categories(session)
    rows = (
        session.execute(select(FoodCategoryORM).order_by(FoodCategoryORM.name))
        .scalars()
        .all()
    )
    return [_to_model(row) for row in rows]


def category_exists(session: Session, category_id: int) -> bool:
    return session.get(FoodCategoryORM, category_id) is not None


__all__ = [
    "DEFAULT_CATEGORIES",
    "ensure_default_categories",
    "list_categories",
    "category_exists",
]
