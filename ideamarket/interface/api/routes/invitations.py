"""Invitation routes.

JSON endpoints serve the admin console and the seller dashboard. The GET
accept/reject endpoints are the capability links emailed to sellers and
answer with small HTML pages instead.
"""

from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ideamarket.application.usecase.invitation import (
    GetProjectInvitationsRequest,
    GetProjectInvitationsUseCase,
    GetSellerInvitationsRequest,
    GetSellerInvitationsUseCase,
    InvitationListResponse,
    InvitationResponse,
    MakeOfferRequest,
    MakeOfferUseCase,
    NotifySellersRequest,
    NotifySellersResponse,
    NotifySellersUseCase,
    RespondToInvitationRequest,
    RespondToInvitationUseCase,
)
from ideamarket.domain.error import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from ideamarket.domain.model.project import Project
from ideamarket.domain.model.seller import RankedSeller
from ideamarket.domain.value import InvitationStatus
from ideamarket.interface.api.pages import (
    accepted_page,
    closed_page,
    not_found_page,
    rejected_page,
)

router = APIRouter(prefix="/api", tags=["invitations"], route_class=DishkaRoute)

INVITE_NOT_FOUND = "Invite not found"


class NotifySellersAPIRequest(BaseModel):
    """API request for inviting ranked sellers to a project."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project: Project
    ranked_sellers: list[RankedSeller]
    draft: bool = False


class OfferAPIRequest(BaseModel):
    """API request for attaching a price offer to an invitation."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    price: float = Field(ge=0)
    note: str = ""
    send_email: bool = False


async def _respond(
    invitation_id: str,
    decision: Literal["accept", "reject"],
    use_case: RespondToInvitationUseCase,
) -> InvitationResponse:
    try:
        return await use_case.execute(
            RespondToInvitationRequest(invitation_id=invitation_id, decision=decision)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=INVITE_NOT_FOUND,
        )
    except InvalidTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


async def _respond_page(
    invitation_id: str,
    decision: Literal["accept", "reject"],
    use_case: RespondToInvitationUseCase,
) -> HTMLResponse:
    try:
        response = await use_case.execute(
            RespondToInvitationRequest(invitation_id=invitation_id, decision=decision)
        )
    except NotFoundError:
        return HTMLResponse(not_found_page(), status_code=status.HTTP_404_NOT_FOUND)
    except InvalidTransitionError as e:
        return HTMLResponse(
            closed_page(InvitationStatus(e.current)),
            status_code=status.HTTP_409_CONFLICT,
        )

    if decision == "accept":
        return HTMLResponse(accepted_page(response.invite))
    return HTMLResponse(rejected_page(response.invite))


@router.post("/notify-sellers", response_model=NotifySellersResponse)
async def notify_sellers(
    request: NotifySellersAPIRequest,
    notify_sellers_use_case: FromDishka[NotifySellersUseCase],
) -> NotifySellersResponse:
    """Invite the top ranked sellers to a project.

    Emails that fail are recorded on their invitation (status error); the
    call itself still succeeds.

    Args:
        request: Project, ranked sellers and draft flag
        notify_sellers_use_case: Notify sellers use case from DI

    Returns:
        Created invitations and how many emails went out

    Raises:
        HTTPException: If the payload is invalid
    """
    try:
        return await notify_sellers_use_case.execute(
            NotifySellersRequest(
                project=request.project,
                ranked_sellers=request.ranked_sellers,
                draft=request.draft,
            )
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/invite/{invitation_id}/accept", response_class=HTMLResponse)
async def accept_invitation_link(
    invitation_id: str,
    respond_use_case: FromDishka[RespondToInvitationUseCase],
) -> HTMLResponse:
    """Accept link from the invitation email."""
    return await _respond_page(invitation_id, "accept", respond_use_case)


@router.get("/invite/{invitation_id}/reject", response_class=HTMLResponse)
async def reject_invitation_link(
    invitation_id: str,
    respond_use_case: FromDishka[RespondToInvitationUseCase],
) -> HTMLResponse:
    """Reject link from the invitation email."""
    return await _respond_page(invitation_id, "reject", respond_use_case)


@router.post("/invite/{invitation_id}/accept", response_model=InvitationResponse)
async def accept_invitation(
    invitation_id: str,
    respond_use_case: FromDishka[RespondToInvitationUseCase],
) -> InvitationResponse:
    """Accept an invitation from the seller dashboard.

    Raises:
        HTTPException: 404 for an unknown invitation, 409 if already answered
    """
    return await _respond(invitation_id, "accept", respond_use_case)


@router.post("/invite/{invitation_id}/reject", response_model=InvitationResponse)
async def reject_invitation(
    invitation_id: str,
    respond_use_case: FromDishka[RespondToInvitationUseCase],
) -> InvitationResponse:
    """Reject an invitation from the seller dashboard.

    Raises:
        HTTPException: 404 for an unknown invitation, 409 if already answered
    """
    return await _respond(invitation_id, "reject", respond_use_case)


@router.post("/invite/{invitation_id}/offer", response_model=InvitationResponse)
async def make_offer(
    invitation_id: str,
    request: OfferAPIRequest,
    make_offer_use_case: FromDishka[MakeOfferUseCase],
) -> InvitationResponse:
    """Attach a price offer to an invitation, optionally emailing it.

    Args:
        invitation_id: Invitation id
        request: Price, note and whether to email the seller
        make_offer_use_case: Make offer use case from DI

    Returns:
        Updated invitation (status error if the email failed)

    Raises:
        HTTPException: 400 for a bad price, 404 for an unknown invitation,
            409 if the seller already answered
    """
    try:
        return await make_offer_use_case.execute(
            MakeOfferRequest(
                invitation_id=invitation_id,
                price=request.price,
                note=request.note,
                send_email=request.send_email,
            )
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=INVITE_NOT_FOUND,
        )
    except InvalidTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.get("/project/{project_id}/invites", response_model=InvitationListResponse)
async def get_project_invitations(
    project_id: str,
    get_project_invitations_use_case: FromDishka[GetProjectInvitationsUseCase],
) -> InvitationListResponse:
    """List a project's invitations, newest first."""
    return await get_project_invitations_use_case.execute(
        GetProjectInvitationsRequest(project_id=project_id)
    )


@router.get("/seller/{seller_id}/invites", response_model=InvitationListResponse)
async def get_seller_invitations(
    seller_id: str,
    get_seller_invitations_use_case: FromDishka[GetSellerInvitationsUseCase],
) -> InvitationListResponse:
    """List a seller's invitations across projects, most recent activity first."""
    return await get_seller_invitations_use_case.execute(
        GetSellerInvitationsRequest(seller_id=seller_id)
    )
