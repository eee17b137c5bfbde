"""Domain services."""

from .base import Service
from .invitation_service import InvitationService
from .mail import MailTransport
from .matcher import match_seller, rank_sellers

__all__ = [
    "InvitationService",
    "MailTransport",
    "Service",
    "match_seller",
    "rank_sellers",
]
