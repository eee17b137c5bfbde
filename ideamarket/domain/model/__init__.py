"""Domain model entities for IdeaMarket."""

from ideamarket.domain.model.invitation import Invitation
from ideamarket.domain.model.mail import MailMessage, OutboxEntry
from ideamarket.domain.model.project import Project, ProjectHistoryEntry
from ideamarket.domain.model.seller import RankedSeller, SellerMatch, SellerProfile

__all__ = [
    "Invitation",
    "MailMessage",
    "OutboxEntry",
    "Project",
    "ProjectHistoryEntry",
    "RankedSeller",
    "SellerMatch",
    "SellerProfile",
]
