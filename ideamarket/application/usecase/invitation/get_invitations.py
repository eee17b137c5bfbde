"""Get invitations use cases."""

from pydantic import BaseModel

from ideamarket.domain.model.invitation import Invitation
from ideamarket.domain.service import InvitationService
from ideamarket.domain.value import ProjectId, SellerId


class GetProjectInvitationsRequest(BaseModel):
    """Get a project's invitations (admin console)."""

    project_id: str


class GetSellerInvitationsRequest(BaseModel):
    """Get a seller's invitations (seller dashboard)."""

    seller_id: str


class InvitationListResponse(BaseModel):
    """List of invitations."""

    invites: list[Invitation]


class GetProjectInvitationsUseCase:
    """Use case for listing a project's invitations, newest first."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: GetProjectInvitationsRequest
    ) -> InvitationListResponse:
        invitations = await self.invitation_service.list_for_project(
            ProjectId(request.project_id)
        )
        return InvitationListResponse(invites=invitations)


class GetSellerInvitationsUseCase:
    """Use case for listing a seller's invitations, most recent activity first."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(
        self, request: GetSellerInvitationsRequest
    ) -> InvitationListResponse:
        invitations = await self.invitation_service.list_for_seller(
            SellerId(request.seller_id)
        )
        return InvitationListResponse(invites=invitations)
