"""Invitation domain service."""

import math
import secrets
from datetime import datetime

import logfire

from ideamarket.domain.error import (
    InvalidTransitionError,
    MailDispatchError,
    NotFoundError,
    ValidationError,
)
from ideamarket.domain.model.invitation import Invitation
from ideamarket.domain.model.mail import MailMessage
from ideamarket.domain.model.project import Project
from ideamarket.domain.model.seller import RankedSeller
from ideamarket.domain.repository import InvitationRepository
from ideamarket.domain.value import (
    InvitationAction,
    InvitationId,
    InvitationStatus,
    ProjectId,
    SellerId,
)

from .base import Service
from .mail import MailTransport


def new_invitation_id() -> InvitationId:
    """Generate an unguessable, URL-safe invitation id."""
    return InvitationId(secrets.token_urlsafe(16))


def transition(invitation: Invitation, action: InvitationAction) -> InvitationStatus:
    """Resolve the status an action leads to.

    Raises:
        InvalidTransitionError: If the action is not allowed from the current status
    """
    target = invitation.status.next_status(action)
    if target is None:
        raise InvalidTransitionError(invitation.id, invitation.status.value, action.value)
    return target


class InvitationService(Service):
    """Domain service for the invitation lifecycle."""

    def __init__(
        self,
        invitation_repository: InvitationRepository,
        mail_transport: MailTransport,
    ) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
            mail_transport: Outbound mail transport
        """
        self.invitation_repository = invitation_repository
        self.mail_transport = mail_transport

    @staticmethod
    def select_candidates(
        ranked_sellers: list[RankedSeller], top_n: int
    ) -> list[RankedSeller]:
        """Pick the top-scoring sellers that can be reached by email.

        The input is re-sorted even if the caller already ranked it. The sort
        is stable, so ties keep input order.

        Args:
            ranked_sellers: Scored candidates
            top_n: Maximum number of candidates to keep

        Returns:
            At most top_n candidates with a non-empty email
        """
        reachable = [s for s in ranked_sellers if s.email]
        reachable.sort(key=lambda s: s.score, reverse=True)
        return reachable[: max(top_n, 0)]

    async def create_invitation(
        self,
        project: Project,
        candidate: RankedSeller,
        draft: bool,
        base_url: str,
    ) -> Invitation:
        """Create and store an invitation for one seller.

        Args:
            project: Project the seller is invited to
            candidate: Selected seller
            draft: Store as draft (no email) instead of sent
            base_url: Externally visible server URL for capability links

        Returns:
            Created invitation

        Raises:
            ValidationError: If the project has no id
        """
        if not project.id.strip():
            raise ValidationError("Project id is required")

        invitation_id = new_invitation_id()
        with logfire.span(
            "invitation_service.create_invitation",
            project_id=project.id,
            seller_id=candidate.seller_id,
            draft=draft,
        ):
            invitation = Invitation(
                id=invitation_id,
                project_id=project.id,
                project_title=project.title,
                seller_id=candidate.seller_id,
                seller_name=candidate.name,
                seller_email=candidate.email or "",
                score=candidate.score,
                overlap=list(candidate.overlap),
                status=InvitationStatus.DRAFT if draft else InvitationStatus.SENT,
                created_at=datetime.now(),
                accept_url=f"{base_url}/api/invite/{invitation_id}/accept",
                reject_url=f"{base_url}/api/invite/{invitation_id}/reject",
            )

            async with self.invitation_repository.project_lock(project.id):
                saved = await self.invitation_repository.add(invitation)

            logfire.info(
                "Invitation created",
                invitation_id=saved.id,
                project_id=project.id,
                seller_id=candidate.seller_id,
                status=saved.status.value,
            )
            return saved

    async def get_invitation(self, invitation_id: InvitationId) -> Invitation:
        """Get an invitation by id.

        Raises:
            NotFoundError: If the invitation does not exist
        """
        invitation = await self.invitation_repository.find_by_id(invitation_id)
        if invitation is None:
            logfire.warn("Invitation not found", invitation_id=invitation_id)
            raise NotFoundError("Invitation", invitation_id)
        return invitation

    async def _apply(
        self, invitation_id: InvitationId, action: InvitationAction, **changes
    ) -> Invitation:
        """Run one state transition as an atomic read-modify-write."""
        current = await self.get_invitation(invitation_id)
        async with self.invitation_repository.project_lock(current.project_id):
            # Re-read under the lock, another request may have moved it
            current = await self.get_invitation(invitation_id)
            target = transition(current, action)
            updated = current.model_copy(update={"status": target, **changes})
            return await self.invitation_repository.update(updated)

    async def accept(self, invitation_id: InvitationId) -> Invitation:
        """Record a seller's acceptance.

        Raises:
            NotFoundError: If the invitation does not exist
            InvalidTransitionError: If the invitation is already closed
        """
        with logfire.span("invitation_service.accept", invitation_id=invitation_id):
            try:
                invitation = await self._apply(
                    invitation_id,
                    InvitationAction.ACCEPT,
                    accepted_at=datetime.now(),
                )
            except InvalidTransitionError as e:
                logfire.warn("Accept rejected", invitation_id=invitation_id, error=str(e))
                raise
            logfire.info(
                "Invitation accepted",
                invitation_id=invitation_id,
                seller_id=invitation.seller_id,
            )
            return invitation

    async def reject(self, invitation_id: InvitationId) -> Invitation:
        """Record a seller's rejection.

        Raises:
            NotFoundError: If the invitation does not exist
            InvalidTransitionError: If the invitation is already closed
        """
        with logfire.span("invitation_service.reject", invitation_id=invitation_id):
            try:
                invitation = await self._apply(
                    invitation_id,
                    InvitationAction.REJECT,
                    rejected_at=datetime.now(),
                )
            except InvalidTransitionError as e:
                logfire.warn("Reject rejected", invitation_id=invitation_id, error=str(e))
                raise
            logfire.info(
                "Invitation rejected",
                invitation_id=invitation_id,
                seller_id=invitation.seller_id,
            )
            return invitation

    async def make_offer(
        self, invitation_id: InvitationId, price: float, note: str
    ) -> Invitation:
        """Attach the admin's price offer to an invitation.

        A previous dispatch error is cleared, the offer may be re-sent.

        Raises:
            ValidationError: If the price is negative or not a finite number
            NotFoundError: If the invitation does not exist
            InvalidTransitionError: If the seller already answered
        """
        if not math.isfinite(price) or price < 0:
            raise ValidationError(f"Invalid offer price: {price}")

        with logfire.span(
            "invitation_service.make_offer", invitation_id=invitation_id, price=price
        ):
            invitation = await self._apply(
                invitation_id,
                InvitationAction.OFFER,
                offered_price=price,
                offer_note=note,
                offered_at=datetime.now(),
                error=None,
            )
            logfire.info(
                "Offer recorded",
                invitation_id=invitation_id,
                seller_id=invitation.seller_id,
                price=price,
            )
            return invitation

    async def deliver(self, invitation: Invitation, message: MailMessage) -> Invitation:
        """Send an email for an invitation and record the outcome.

        The send happens outside the project lock. On success the message id
        is stored. On failure the invitation moves to error, unless it has
        meanwhile left the status the email was sent for (a seller answering
        concurrently wins). Failures never propagate.

        Args:
            invitation: Invitation the message belongs to
            message: Composed email

        Returns:
            Invitation as stored after recording the outcome
        """
        sent_for = invitation.status
        with logfire.span(
            "invitation_service.deliver",
            invitation_id=invitation.id,
            to=message.to,
            status=sent_for.value,
        ):
            try:
                message_id = await self.mail_transport.send(message)
            except MailDispatchError as e:
                logfire.error(
                    "Invitation email failed",
                    invitation_id=invitation.id,
                    to=message.to,
                    error=str(e),
                )
                return await self._record_failure(
                    invitation.id, sent_for, str(e) or "Mail dispatch failed"
                )

            async with self.invitation_repository.project_lock(invitation.project_id):
                current = await self.get_invitation(invitation.id)
                updated = current.model_copy(update={"message_id": message_id})
                saved = await self.invitation_repository.update(updated)

            logfire.info(
                "Invitation email sent",
                invitation_id=invitation.id,
                message_id=message_id,
            )
            return saved

    async def _record_failure(
        self, invitation_id: InvitationId, sent_for: InvitationStatus, error: str
    ) -> Invitation:
        current = await self.get_invitation(invitation_id)
        async with self.invitation_repository.project_lock(current.project_id):
            current = await self.get_invitation(invitation_id)
            if current.status != sent_for:
                logfire.warn(
                    "Invitation moved on before email failed, keeping status",
                    invitation_id=invitation_id,
                    status=current.status.value,
                )
                return current
            target = transition(current, InvitationAction.FAIL_DISPATCH)
            updated = current.model_copy(update={"status": target, "error": error})
            return await self.invitation_repository.update(updated)

    async def list_for_project(self, project_id: ProjectId) -> list[Invitation]:
        """List a project's invitations, most recently created first."""
        with logfire.span("invitation_service.list_for_project", project_id=project_id):
            invitations = await self.invitation_repository.find_by_project(project_id)
            logfire.info(
                "Project invitations listed",
                project_id=project_id,
                count=len(invitations),
            )
            return invitations

    async def list_for_seller(self, seller_id: SellerId) -> list[Invitation]:
        """List a seller's invitations, most recent activity first.

        Activity is the acceptance time, else the offer time, else creation.
        """
        with logfire.span("invitation_service.list_for_seller", seller_id=seller_id):
            invitations = await self.invitation_repository.find_by_seller(seller_id)
            invitations.sort(key=lambda inv: inv.last_activity_at, reverse=True)
            logfire.info(
                "Seller invitations listed",
                seller_id=seller_id,
                count=len(invitations),
            )
            return invitations
