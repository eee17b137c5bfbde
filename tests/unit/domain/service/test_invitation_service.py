"""Unit tests for InvitationService."""

from datetime import datetime

import pytest

from ideamarket.domain.error import (
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from ideamarket.domain.model.seller import RankedSeller
from ideamarket.domain.repository import InvitationRepository
from ideamarket.domain.service import InvitationService, MailTransport
from ideamarket.domain.service.email_templates import invitation_email
from ideamarket.domain.value import InvitationId, InvitationStatus, SellerId
from tests.conftest import make_candidate, make_invitation, make_project
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

BASE_URL = "http://localhost:4000"


class TestSelectCandidates:
    """Tests for InvitationService.select_candidates."""

    def test_top_n_by_score(self):
        """Keeps the N best, best first, regardless of input order."""
        ranked = [make_candidate(f"s{i}", score=i) for i in range(8)]

        selected = InvitationService.select_candidates(ranked, 5)

        assert [c.seller_id for c in selected] == ["s7", "s6", "s5", "s4", "s3"]

    def test_sellers_without_email_are_skipped(self):
        """Unreachable sellers never take a slot."""
        ranked = [
            make_candidate("no-mail", score=9, email=None),
            RankedSeller(seller_id=SellerId("blank"), score=8, email=""),
            make_candidate("ok", score=1),
        ]

        selected = InvitationService.select_candidates(ranked, 5)

        assert [c.seller_id for c in selected] == ["ok"]

    def test_ties_keep_input_order(self):
        """Equal scores keep the caller's order."""
        ranked = [make_candidate("a", score=2), make_candidate("b", score=2)]

        selected = InvitationService.select_candidates(ranked, 5)

        assert [c.seller_id for c in selected] == ["a", "b"]


class TestCreateInvitation:
    """Tests for InvitationService.create_invitation."""

    @pytest.mark.asyncio
    async def test_sent_invitation_snapshots_project_and_seller(self, unit_env):
        """New invitation copies titles and builds capability links."""
        # Arrange
        service = await unit_env.get(InvitationService)
        project = make_project(title="Smart Irrigation")
        candidate = make_candidate("s1", score=3, overlap=["python"])

        # Act
        invitation = await service.create_invitation(
            project, candidate, draft=False, base_url=BASE_URL
        )

        # Assert
        assert invitation.status == InvitationStatus.SENT
        assert invitation.project_title == "Smart Irrigation"
        assert invitation.seller_email == "s1@example.com"
        assert invitation.score == 3
        assert invitation.overlap == ["python"]
        assert invitation.accept_url == f"{BASE_URL}/api/invite/{invitation.id}/accept"
        assert invitation.reject_url == f"{BASE_URL}/api/invite/{invitation.id}/reject"

    @pytest.mark.asyncio
    async def test_draft_invitation(self, unit_env):
        """Draft flag stores the invitation as draft."""
        service = await unit_env.get(InvitationService)

        invitation = await service.create_invitation(
            make_project(), make_candidate("s1"), draft=True, base_url=BASE_URL
        )

        assert invitation.status == InvitationStatus.DRAFT

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, unit_env):
        """Every invitation gets its own unguessable id."""
        service = await unit_env.get(InvitationService)
        project = make_project()

        ids = {
            (
                await service.create_invitation(
                    project, make_candidate("s1"), draft=True, base_url=BASE_URL
                )
            ).id
            for _ in range(20)
        }

        assert len(ids) == 20
        assert all(len(i) >= 16 for i in ids)

    @pytest.mark.asyncio
    async def test_blank_project_id_rejected(self, unit_env):
        """Invitations cannot be filed under an empty project id."""
        service = await unit_env.get(InvitationService)

        with pytest.raises(ValidationError):
            await service.create_invitation(
                make_project(project_id="  "),
                make_candidate("s1"),
                draft=False,
                base_url=BASE_URL,
            )


class TestAnswerInvitation:
    """Tests for accept and reject."""

    @pytest.mark.asyncio
    async def test_accept_sets_status_and_timestamp(self, unit_env):
        """Accepting records when it happened."""
        # Arrange
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(make_invitation("inv1"))

        # Act
        invitation = await service.accept(InvitationId("inv1"))

        # Assert
        assert invitation.status == InvitationStatus.ACCEPTED
        assert invitation.accepted_at is not None
        assert (await repo.find_by_id(InvitationId("inv1"))).status == (
            InvitationStatus.ACCEPTED
        )

    @pytest.mark.asyncio
    async def test_reject_sets_status_and_timestamp(self, unit_env):
        """Rejecting records when it happened."""
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(make_invitation("inv1", status=InvitationStatus.OFFERED))

        invitation = await service.reject(InvitationId("inv1"))

        assert invitation.status == InvitationStatus.REJECTED
        assert invitation.rejected_at is not None
        assert invitation.accepted_at is None

    @pytest.mark.asyncio
    async def test_second_answer_is_refused_without_change(self, unit_env):
        """A terminal invitation keeps its first answer."""
        # Arrange
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(make_invitation("inv1"))
        accepted = await service.accept(InvitationId("inv1"))

        # Act / Assert
        with pytest.raises(InvalidTransitionError):
            await service.reject(InvitationId("inv1"))
        with pytest.raises(InvalidTransitionError):
            await service.accept(InvitationId("inv1"))

        assert await repo.find_by_id(InvitationId("inv1")) == accepted

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, unit_env):
        """Unknown ids raise and leave the store untouched."""
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        existing = await repo.add(make_invitation("inv1"))

        with pytest.raises(NotFoundError):
            await service.accept(InvitationId("missing"))
        with pytest.raises(NotFoundError):
            await service.reject(InvitationId("missing"))
        with pytest.raises(NotFoundError):
            await service.make_offer(InvitationId("missing"), 10, "")

        assert await repo.find_by_project(existing.project_id) == [existing]


class TestMakeOffer:
    """Tests for InvitationService.make_offer."""

    @pytest.mark.asyncio
    async def test_offer_records_price_and_note(self, unit_env):
        """Offer moves the invitation to offered with price details."""
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(make_invitation("inv1", status=InvitationStatus.DRAFT))

        invitation = await service.make_offer(InvitationId("inv1"), 500, "Two weeks")

        assert invitation.status == InvitationStatus.OFFERED
        assert invitation.offered_price == 500
        assert invitation.offer_note == "Two weeks"
        assert invitation.offered_at is not None

    @pytest.mark.asyncio
    async def test_offer_clears_previous_error(self, unit_env):
        """Re-offering a failed invitation clears its error."""
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(
            make_invitation("inv1", status=InvitationStatus.ERROR, error="SMTP down")
        )

        invitation = await service.make_offer(InvitationId("inv1"), 100, "")

        assert invitation.status == InvitationStatus.OFFERED
        assert invitation.error is None

    @pytest.mark.asyncio
    async def test_offer_after_answer_refused(self, unit_env):
        """Answered invitations cannot receive an offer."""
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(make_invitation("inv1", status=InvitationStatus.REJECTED))

        with pytest.raises(InvalidTransitionError):
            await service.make_offer(InvitationId("inv1"), 100, "")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", [-1.0, float("inf"), float("nan")])
    async def test_invalid_price_refused(self, unit_env, price):
        """Negative and non-finite prices are rejected before any change."""
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        original = await repo.add(make_invitation("inv1"))

        with pytest.raises(ValidationError):
            await service.make_offer(InvitationId("inv1"), price, "")

        assert await repo.find_by_id(InvitationId("inv1")) == original


class TestDeliver:
    """Tests for InvitationService.deliver."""

    @pytest.mark.asyncio
    async def test_success_stores_message_id(self, unit_env):
        """A delivered email leaves the status alone and records the id."""
        # Arrange
        service = await unit_env.get(InvitationService)
        mail = await unit_env.get(MailTransport)
        project = make_project()
        invitation = await service.create_invitation(
            project, make_candidate("s1"), draft=False, base_url=BASE_URL
        )

        # Act
        delivered = await service.deliver(
            invitation, invitation_email(project, invitation, "bot@ideamarket.in")
        )

        # Assert
        assert delivered.status == InvitationStatus.SENT
        assert delivered.message_id == mail.outbox[0].id
        assert mail.outbox[0].to == "s1@example.com"

    @pytest.mark.asyncio
    async def test_failure_marks_error_and_keeps_fields(self, unit_env):
        """A failed email turns the invitation into error with the message."""
        service = await unit_env.get(InvitationService)
        mail = await unit_env.get(MailTransport)
        mail.fail_with = "Connection refused"
        project = make_project()
        invitation = await service.create_invitation(
            project, make_candidate("s1", score=4), draft=False, base_url=BASE_URL
        )

        delivered = await service.deliver(
            invitation, invitation_email(project, invitation, "bot@ideamarket.in")
        )

        assert delivered.status == InvitationStatus.ERROR
        assert delivered.error == "Connection refused"
        assert delivered.score == 4
        assert delivered.accept_url == invitation.accept_url
        assert mail.outbox == []

    @pytest.mark.asyncio
    async def test_failure_after_concurrent_answer_keeps_answer(self, unit_env):
        """An answer that lands while the email is in flight wins."""
        # Arrange
        service = await unit_env.get(InvitationService)
        mail = await unit_env.get(MailTransport)
        mail.fail_with = "Timeout"
        project = make_project()
        invitation = await service.create_invitation(
            project, make_candidate("s1"), draft=False, base_url=BASE_URL
        )
        await service.accept(invitation.id)

        # Act - deliver still holds the pre-accept snapshot
        delivered = await service.deliver(
            invitation, invitation_email(project, invitation, "bot@ideamarket.in")
        )

        # Assert
        assert delivered.status == InvitationStatus.ACCEPTED
        assert delivered.error is None


class TestListInvitations:
    """Tests for the invitation queries."""

    @pytest.mark.asyncio
    async def test_project_list_newest_first(self, unit_env):
        """Project invitations come back in reverse creation order."""
        service = await unit_env.get(InvitationService)
        project = make_project()
        first = await service.create_invitation(
            project, make_candidate("s1"), draft=True, base_url=BASE_URL
        )
        second = await service.create_invitation(
            project, make_candidate("s2"), draft=True, base_url=BASE_URL
        )

        invitations = await service.list_for_project(project.id)

        assert [i.id for i in invitations] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_unknown_project_is_empty(self, unit_env):
        """Unknown projects simply have no invitations."""
        service = await unit_env.get(InvitationService)

        assert await service.list_for_project(make_project("nope").id) == []

    @pytest.mark.asyncio
    async def test_seller_list_by_latest_activity(self, unit_env):
        """Seller invitations sort by acceptance, then offer, then creation."""
        # Arrange
        service = await unit_env.get(InvitationService)
        repo = await unit_env.get(InvitationRepository)
        await repo.add(
            make_invitation("old-created", project_id="p1", created_at=datetime(2024, 1, 1))
        )
        await repo.add(
            make_invitation(
                "offered",
                project_id="p2",
                created_at=datetime(2023, 1, 1),
                offered_at=datetime(2024, 3, 1),
            )
        )
        await repo.add(
            make_invitation(
                "accepted",
                project_id="p3",
                created_at=datetime(2023, 1, 1),
                offered_at=datetime(2023, 6, 1),
                accepted_at=datetime(2024, 2, 1),
            )
        )
        await repo.add(make_invitation("other-seller", seller_id="s2"))

        # Act
        invitations = await service.list_for_seller(SellerId("s1"))

        # Assert
        assert [i.id for i in invitations] == ["offered", "accepted", "old-created"]
