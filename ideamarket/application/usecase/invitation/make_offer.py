"""Make offer use case."""

import logfire
from pydantic import BaseModel, Field

from ideamarket.application.usecase.base import BaseUseCase
from ideamarket.application.usecase.invitation.respond_to_invitation import (
    InvitationResponse,
)
from ideamarket.config import Settings
from ideamarket.domain.service import InvitationService
from ideamarket.domain.service.email_templates import offer_email
from ideamarket.domain.value import InvitationId


class MakeOfferRequest(BaseModel):
    """Admin's price offer for an invitation."""

    invitation_id: str
    price: float = Field(ge=0)
    note: str = ""
    send_email: bool = False


class MakeOfferUseCase(BaseUseCase):
    """Use case for attaching a price to an invitation and optionally emailing it."""

    def __init__(self, invitation_service: InvitationService, settings: Settings) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            settings: Application settings
        """
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(self, request: MakeOfferRequest) -> InvitationResponse:
        """Record the offer, then send it if requested.

        The offer stays recorded when the email fails; the invitation is
        then reported with status error.

        Raises:
            NotFoundError: If the invitation does not exist
            InvalidTransitionError: If the seller already answered
        """
        invitation_id = InvitationId(request.invitation_id)
        with logfire.span(
            "make_offer",
            invitation_id=invitation_id,
            price=request.price,
            send_email=request.send_email,
        ):
            invitation = await self.invitation_service.make_offer(
                invitation_id, request.price, request.note
            )

            if request.send_email:
                message = offer_email(invitation, self.settings.mail.sender)
                invitation = await self.invitation_service.deliver(invitation, message)

            return InvitationResponse(invite=invitation)
