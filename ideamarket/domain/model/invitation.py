"""Invitation entity.

An invitation links one project to one candidate seller. Its id doubles as
the capability token embedded in the accept/reject links emailed to the
seller, so it must be unguessable.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ideamarket.domain.model.common import DomainModel
from ideamarket.domain.value import (
    InvitationId,
    InvitationStatus,
    MessageId,
    ProjectId,
    SellerId,
)


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - Project title and seller name/email are snapshots taken at creation;
      later profile edits do not propagate
    - Status only changes through InvitationStatus.next_status
    - Invitations are never deleted
    - Repeated notify calls create new invitations for the same
      project/seller pair rather than updating the existing one
    """

    id: InvitationId
    project_id: ProjectId
    project_title: str = ""
    seller_id: SellerId
    seller_name: str = ""
    seller_email: str
    score: float = 0
    overlap: list[str] = Field(default_factory=list)
    status: InvitationStatus
    created_at: datetime = Field(default_factory=datetime.now)
    accept_url: str
    reject_url: str
    offered_price: Optional[float] = None
    offer_note: Optional[str] = None
    offered_at: Optional[datetime] = None
    accepted_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None
    message_id: Optional[MessageId] = None
    error: Optional[str] = None

    @property
    def last_activity_at(self) -> datetime:
        """Timestamp used to order a seller's invitations."""
        return self.accepted_at or self.offered_at or self.created_at
