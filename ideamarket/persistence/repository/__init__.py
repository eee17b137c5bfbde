"""Repository implementations."""

from ideamarket.persistence.repository.inmemory import InMemoryInvitationRepository

__all__ = [
    "InMemoryInvitationRepository",
]
