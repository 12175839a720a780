"""Food category endpoint (public)."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fridgeshare.db.categories import list_categories
from fridgeshare.models.items import Category
from fridgeshare.server.deps import get_db

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[Category], summary="List food categories")
def categories_list(session: Session = Depends(get_db)) -> list[Category]:
    return list_categories(session)
