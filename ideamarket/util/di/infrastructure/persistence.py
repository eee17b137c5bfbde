"""Persistence infrastructure providers."""

from dishka import Scope, provide

from ideamarket.domain.repository import InvitationRepository
from ideamarket.persistence.repository import InMemoryInvitationRepository
from ideamarket.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence provider - concrete, no mocks needed.

    The invitation store lives for the lifetime of the container, so one
    store is shared by every request and is dropped on restart. A durable
    backend only has to implement InvitationRepository and be returned here.
    """

    @provide(scope=Scope.APP)
    def get_invitation_repository(self) -> InvitationRepository:
        """Provide the process-wide invitation store."""
        return InMemoryInvitationRepository()
