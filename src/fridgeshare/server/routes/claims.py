"""Claim endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from fridgeshare import metrics
from fridgeshare.db.claims import create_claim, decide_claim, list_my_claims, list_owner_claims
from fridgeshare.models.claims import Claim, ClaimCreateRequest, ClaimDecisionRequest
from fridgeshare.models.users import PublicUser
from fridgeshare.server.deps import RowIdPath, get_current_user, get_db

router = APIRouter(prefix="/api/claims", tags=["claims"])


@router.post(
    "",
    response_model=Claim,
    status_code=status.HTTP_201_CREATED,
    summary="Claim an available item",
)
def claims_create(
    payload: ClaimCreateRequest,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> Claim:
    claim = create_claim(session, claimer_id=user.id, item_id=payload.item_id)
    metrics.CLAIMS_CREATED.inc()
    return claim


@router.get("/for-owner", response_model=list[Claim], summary="Claims on my items")
def claims_for_owner(
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[Claim]:
    return list_owner_claims(session, owner_id=user.id)


@router.get("/mine", response_model=list[Claim], summary="Claims I made")
def claims_mine(
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> list[Claim]:
    return list_my_claims(session, claimer_id=user.id)


@router.post("/{claim_id}/decision", response_model=Claim, summary="Accept or reject a claim")
def claims_decide(
    claim_id: RowIdPath,
    payload: ClaimDecisionRequest,
    user: PublicUser = Depends(get_current_user),
    session: Session = Depends(get_db),
) -> Claim:
    claim = decide_claim(session, owner_id=user.id, claim_id=claim_id, decision=payload.decision)
    metrics.CLAIM_DECISIONS.labels(decision=claim.status.value).inc()
    return claim
