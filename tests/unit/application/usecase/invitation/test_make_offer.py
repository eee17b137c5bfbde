"""Unit tests for MakeOfferUseCase."""

import pytest

from ideamarket.application.usecase.invitation import (
    MakeOfferRequest,
    MakeOfferUseCase,
)
from ideamarket.domain.error import InvalidTransitionError
from ideamarket.domain.repository import InvitationRepository
from ideamarket.domain.service import MailTransport
from ideamarket.domain.value import InvitationStatus
from tests.conftest import make_invitation
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestMakeOfferUseCase:
    """Tests for MakeOfferUseCase."""

    @pytest.mark.asyncio
    async def test_offer_without_email(self, unit_env):
        """Offer is recorded silently when no email is requested."""
        # Arrange
        use_case = await unit_env.get(MakeOfferUseCase)
        mail = await unit_env.get(MailTransport)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(make_invitation("inv1", status=InvitationStatus.DRAFT))

        # Act
        response = await use_case.execute(
            MakeOfferRequest(invitation_id="inv1", price=500, note="Two weeks")
        )

        # Assert
        assert response.ok
        assert response.invite.status == InvitationStatus.OFFERED
        assert response.invite.offered_price == 500
        assert response.invite.offer_note == "Two weeks"
        assert response.invite.message_id is None
        assert mail.outbox == []
        assert await repo.find_by_project(response.invite.project_id) == [
            response.invite
        ]

    @pytest.mark.asyncio
    async def test_offer_with_email(self, unit_env):
        """Requested offer email goes to the seller with the price."""
        use_case = await unit_env.get(MakeOfferUseCase)
        mail = await unit_env.get(MailTransport)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(make_invitation("inv1", status=InvitationStatus.DRAFT))

        response = await use_case.execute(
            MakeOfferRequest(invitation_id="inv1", price=750, send_email=True)
        )

        assert response.invite.status == InvitationStatus.OFFERED
        assert response.invite.message_id == mail.outbox[0].id
        assert mail.outbox[0].subject == '[IdeaMarket] Offer for "Smart Irrigation"'
        assert "Offered Price: 750" in mail.outbox[0].body

    @pytest.mark.asyncio
    async def test_failed_offer_email_keeps_offer(self, unit_env):
        """A failed offer email turns status to error but keeps the price."""
        # Arrange
        use_case = await unit_env.get(MakeOfferUseCase)
        mail = await unit_env.get(MailTransport)
        repo = await unit_env.get(InvitationRepository)
        mail.fail_with = "Timeout"
        await repo.add(make_invitation("inv1", status=InvitationStatus.DRAFT))

        # Act
        response = await use_case.execute(
            MakeOfferRequest(invitation_id="inv1", price=300, note="n", send_email=True)
        )

        # Assert
        invitation = response.invite
        assert invitation.status == InvitationStatus.ERROR
        assert invitation.error == "Timeout"
        assert invitation.offered_price == 300
        assert invitation.offer_note == "n"
        assert invitation.offered_at is not None

    @pytest.mark.asyncio
    async def test_offer_can_be_retried_after_failure(self, unit_env):
        """Re-offering an errored invitation succeeds once mail works again."""
        use_case = await unit_env.get(MakeOfferUseCase)
        mail = await unit_env.get(MailTransport)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(make_invitation("inv1", status=InvitationStatus.DRAFT))
        mail.fail_with = "Timeout"
        await use_case.execute(
            MakeOfferRequest(invitation_id="inv1", price=300, send_email=True)
        )

        mail.fail_with = None
        response = await use_case.execute(
            MakeOfferRequest(invitation_id="inv1", price=320, send_email=True)
        )

        assert response.invite.status == InvitationStatus.OFFERED
        assert response.invite.error is None
        assert response.invite.offered_price == 320

    @pytest.mark.asyncio
    async def test_offer_on_answered_invitation_refused(self, unit_env):
        """Offers cannot reopen an answered invitation."""
        use_case = await unit_env.get(MakeOfferUseCase)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(make_invitation("inv1", status=InvitationStatus.ACCEPTED))

        with pytest.raises(InvalidTransitionError):
            await use_case.execute(MakeOfferRequest(invitation_id="inv1", price=1))
