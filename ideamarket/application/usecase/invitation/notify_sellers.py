"""Notify sellers use case."""

import logfire
from pydantic import BaseModel

from ideamarket.application.usecase.base import BaseUseCase
from ideamarket.config import Settings
from ideamarket.domain.model.invitation import Invitation
from ideamarket.domain.model.project import Project
from ideamarket.domain.model.seller import RankedSeller
from ideamarket.domain.service import InvitationService
from ideamarket.domain.service.email_templates import invitation_email
from ideamarket.domain.value import InvitationStatus


class NotifySellersRequest(BaseModel):
    """Request to invite the best-matching sellers to a project."""

    project: Project
    ranked_sellers: list[RankedSeller]
    draft: bool = False


class NotifySellersResponse(BaseModel):
    """Response after creating invitations."""

    ok: bool = True
    invites: list[Invitation]
    sent: int  # Invitations whose email went out
    draft: bool


class NotifySellersUseCase(BaseUseCase):
    """Use case for creating invitations for the top N ranked sellers.

    Draft invitations are only stored, waiting for the admin to attach a
    price. Otherwise each seller is emailed right away; a failed email marks
    that invitation as error but never fails the whole call.
    """

    def __init__(self, invitation_service: InvitationService, settings: Settings) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            settings: Application settings
        """
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(self, request: NotifySellersRequest) -> NotifySellersResponse:
        """Execute notify sellers use case.

        Args:
            request: Project, ranked sellers and draft flag

        Returns:
            Created invitations with the number actually sent
        """
        project = request.project
        top_n = self.settings.invitations.top_n

        with logfire.span(
            "notify_sellers",
            project_id=project.id,
            candidates=len(request.ranked_sellers),
            draft=request.draft,
            top_n=top_n,
        ):
            candidates = self.invitation_service.select_candidates(
                request.ranked_sellers, top_n
            )

            invitations: list[Invitation] = []
            for candidate in candidates:
                invitation = await self.invitation_service.create_invitation(
                    project=project,
                    candidate=candidate,
                    draft=request.draft,
                    base_url=self.settings.api.base_url,
                )

                if not request.draft:
                    message = invitation_email(
                        project, invitation, self.settings.mail.sender
                    )
                    invitation = await self.invitation_service.deliver(
                        invitation, message
                    )

                invitations.append(invitation)

            sent = sum(1 for inv in invitations if inv.status == InvitationStatus.SENT)
            logfire.info(
                "Sellers notified",
                project_id=project.id,
                created=len(invitations),
                sent=sent,
                draft=request.draft,
            )

            return NotifySellersResponse(
                invites=invitations,
                sent=sent,
                draft=request.draft,
            )
