"""Domain layer DI providers."""

from dishka import Scope, provide

from ideamarket.domain.repository import InvitationRepository
from ideamarket.domain.service import InvitationService, MailTransport
from ideamarket.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped; the state they act on (the invitation
    store, the mail transport) is APP-scoped and shared across requests.
    """

    scope = Scope.REQUEST

    @provide
    def get_invitation_service(
        self,
        invitation_repository: InvitationRepository,
        mail_transport: MailTransport,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invitation_repository=invitation_repository,
            mail_transport=mail_transport,
        )
