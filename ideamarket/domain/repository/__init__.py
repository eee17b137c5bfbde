"""Repository interfaces for IdeaMarket domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from ideamarket.domain.repository.invitation import InvitationRepository

__all__ = [
    "InvitationRepository",
]
