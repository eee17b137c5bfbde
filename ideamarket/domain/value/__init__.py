"""Domain value objects for IdeaMarket."""

from ideamarket.domain.value.identifiers import (
    InvitationId,
    MessageId,
    ProjectId,
    SellerId,
)
from ideamarket.domain.value.types import (
    InvitationAction,
    InvitationStatus,
    ProjectStatus,
)

__all__ = [
    # Identifiers
    "ProjectId",
    "SellerId",
    "InvitationId",
    "MessageId",
    # Types
    "InvitationAction",
    "InvitationStatus",
    "ProjectStatus",
]
