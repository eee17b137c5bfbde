"""Invitation repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from ideamarket.domain.model.invitation import Invitation
from ideamarket.domain.value import InvitationId, ProjectId, SellerId


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def project_lock(self, project_id: ProjectId) -> AbstractAsyncContextManager:
        """Mutual-exclusion scope for one project's invitation list.

        Every read-modify-write on a project's invitations must run inside
        this scope so concurrent accept/offer calls serialize.

        Args:
            project_id: The project whose invitations are being mutated

        Returns:
            Async context manager holding the project's lock
        """
        pass

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, invitation: Invitation) -> Invitation:
        """Add a new invitation to the front of its project's list.

        Never de-duplicates: a second invitation for the same project/seller
        pair is stored alongside the first.

        Args:
            invitation: The invitation to add

        Returns:
            The stored invitation
        """
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Replace a stored invitation in place, keeping its position.

        Args:
            invitation: The updated invitation

        Returns:
            The stored invitation

        Raises:
            NotFoundError: If no invitation with this ID exists
        """
        pass

    @abstractmethod
    async def find_by_project(self, project_id: ProjectId) -> list[Invitation]:
        """Find a project's invitations, most recently created first.

        Args:
            project_id: The project's ID

        Returns:
            List of invitations, empty for unknown projects
        """
        pass

    @abstractmethod
    async def find_by_seller(self, seller_id: SellerId) -> list[Invitation]:
        """Find every invitation addressed to a seller, across projects.

        Args:
            seller_id: The seller's ID

        Returns:
            List of invitations in storage order
        """
        pass
