"""User search endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fridgeshare.db.users import search_users
from fridgeshare.models.users import PublicUser
from fridgeshare.server.deps import get_current_user, get_db

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/search", response_model=list[PublicUser], summary="Search other accounts")
def users_search(
    q: str = Query(default=""),
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[PublicUser]:
    return search_users(session, caller_id=user.id, query=q)
