"""Social share link stub.

No request leaves the server: the endpoint only builds a placeholder URL for
the supported networks so the UI has something to copy.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fridgeshare.errors import BadRequestError
from fridgeshare.models.claims import ShareLinkRequest, ShareLinkResponse
from fridgeshare.models.users import PublicUser
from fridgeshare.server.deps import get_current_user

SUPPORTED_NETWORKS = ("instagram", "facebook")
SHARE_URL_TEMPLATE = "https://example.com/share/{network}/item/{item_id}"

router = APIRouter(prefix="/api", tags=["share"])


def build_share_link(item_id: int, network: str) -> ShareLinkResponse:
    if network not in SUPPORTED_NETWORKS:
        raise BadRequestError("network must be " + " or ".join(SUPPORTED_NETWORKS))
    return ShareLinkResponse(
        share_url=SHARE_URL_TEMPLATE.format(network=network, item_id=item_id),
        note="Stubbed share link (no real integration).",
    )


@router.post("/share", response_model=ShareLinkResponse, summary="Build a share link")
def share_link(
    payload: ShareLinkRequest,
    user: PublicUser = Depends(get_current_user),
) -> ShareLinkResponse:
    if payload.item_id is None or not payload.network:
        raise BadRequestError("itemId and network required")
    return build_share_link(payload.item_id, payload.network)
