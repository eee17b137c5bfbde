"""Application layer DI providers."""

from dishka import Scope, provide

from ideamarket.application.usecase.invitation import (
    GetProjectInvitationsUseCase,
    GetSellerInvitationsUseCase,
    MakeOfferUseCase,
    NotifySellersUseCase,
    RespondToInvitationUseCase,
)
from ideamarket.application.usecase.matching import RankSellersUseCase
from ideamarket.config import Settings
from ideamarket.domain.service import InvitationService
from ideamarket.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_notify_sellers_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> NotifySellersUseCase:
        """Provide notify sellers use case."""
        return NotifySellersUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_respond_to_invitation_use_case(
        self, invitation_service: InvitationService
    ) -> RespondToInvitationUseCase:
        """Provide respond to invitation use case."""
        return RespondToInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_make_offer_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> MakeOfferUseCase:
        """Provide make offer use case."""
        return MakeOfferUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_project_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> GetProjectInvitationsUseCase:
        """Provide get project invitations use case."""
        return GetProjectInvitationsUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_seller_invitations_use_case(
        self, invitation_service: InvitationService
    ) -> GetSellerInvitationsUseCase:
        """Provide get seller invitations use case."""
        return GetSellerInvitationsUseCase(invitation_service=invitation_service)

    # Matching use cases
    @provide(scope=Scope.REQUEST)
    def get_rank_sellers_use_case(self) -> RankSellersUseCase:
        """Provide rank sellers use case."""
        return RankSellersUseCase()
