"""Respond to invitation use case."""

from typing import Literal

import logfire
from pydantic import BaseModel

from ideamarket.application.usecase.base import BaseUseCase
from ideamarket.domain.model.invitation import Invitation
from ideamarket.domain.service import InvitationService
from ideamarket.domain.value import InvitationId


class RespondToInvitationRequest(BaseModel):
    """A seller's answer to an invitation."""

    invitation_id: str
    decision: Literal["accept", "reject"]


class InvitationResponse(BaseModel):
    """Single invitation after a state change."""

    ok: bool = True
    invite: Invitation


class RespondToInvitationUseCase(BaseUseCase):
    """Use case for a seller accepting or rejecting an invitation.

    Shared by the emailed capability links and the seller dashboard.
    """

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: RespondToInvitationRequest) -> InvitationResponse:
        """Apply the seller's decision.

        Raises:
            NotFoundError: If the invitation does not exist
            InvalidTransitionError: If the invitation was already answered
        """
        invitation_id = InvitationId(request.invitation_id)
        with logfire.span(
            "respond_to_invitation",
            invitation_id=invitation_id,
            decision=request.decision,
        ):
            if request.decision == "accept":
                invitation = await self.invitation_service.accept(invitation_id)
            else:
                invitation = await self.invitation_service.reject(invitation_id)
            return InvitationResponse(invite=invitation)
