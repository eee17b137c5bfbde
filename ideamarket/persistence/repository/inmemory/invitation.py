"""In-memory invitation repository."""

import asyncio
from collections import defaultdict
from contextlib import AbstractAsyncContextManager
from typing import Optional

from ideamarket.domain.error import NotFoundError
from ideamarket.domain.model.invitation import Invitation
from ideamarket.domain.repository.invitation import InvitationRepository
from ideamarket.domain.value import InvitationId, ProjectId, SellerId


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository.

    Invitations are kept in one list per project, newest first. Everything
    is lost when the process exits.
    """

    def __init__(self) -> None:
        self._invitations: dict[ProjectId, list[Invitation]] = {}
        self._locks: defaultdict[ProjectId, asyncio.Lock] = defaultdict(asyncio.Lock)

    def project_lock(self, project_id: ProjectId) -> AbstractAsyncContextManager:
        """Return the lock guarding a project's invitation list."""
        return self._locks[project_id]

    def _locate(self, invitation_id: InvitationId) -> Optional[tuple[ProjectId, int]]:
        for project_id, invitations in self._invitations.items():
            for idx, invitation in enumerate(invitations):
                if invitation.id == invitation_id:
                    return project_id, idx
        return None

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        location = self._locate(invitation_id)
        if location is None:
            return None
        project_id, idx = location
        return self._invitations[project_id][idx]

    async def add(self, invitation: Invitation) -> Invitation:
        """Prepend an invitation to its project's list."""
        self._invitations.setdefault(invitation.project_id, []).insert(0, invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Replace an invitation in place."""
        location = self._locate(invitation.id)
        if location is None:
            raise NotFoundError("Invitation", invitation.id)
        project_id, idx = location
        self._invitations[project_id][idx] = invitation
        return invitation

    async def find_by_project(self, project_id: ProjectId) -> list[Invitation]:
        """Find invitations for a project, newest first."""
        return list(self._invitations.get(project_id, []))

    async def find_by_seller(self, seller_id: SellerId) -> list[Invitation]:
        """Find invitations for a seller across all projects."""
        return [
            invitation
            for invitations in self._invitations.values()
            for invitation in invitations
            if invitation.seller_id == seller_id
        ]
