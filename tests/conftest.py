"""Test configuration and fixtures."""

from datetime import datetime

import logfire

from ideamarket.domain.model.invitation import Invitation
from ideamarket.domain.model.project import Project
from ideamarket.domain.model.seller import RankedSeller, SellerProfile
from ideamarket.domain.value import (
    InvitationId,
    InvitationStatus,
    ProjectId,
    SellerId,
)


def make_project(
    project_id: str = "p1",
    title: str = "Smart Irrigation",
    category: str = "IoT",
    skills: list[str] | None = None,
    **kwargs,
) -> Project:
    """Build a project with sensible defaults."""
    return Project(
        id=ProjectId(project_id),
        title=title,
        category=category,
        skills=skills if skills is not None else ["python", "iot"],
        **kwargs,
    )


def make_seller(
    seller_id: str,
    skills: list[str] | None = None,
    categories: list[str] | None = None,
    email: str | None = None,
    name: str | None = None,
) -> SellerProfile:
    """Build a seller profile; email and name derive from the id."""
    return SellerProfile(
        id=SellerId(seller_id),
        name=name if name is not None else seller_id.title(),
        email=email if email is not None else f"{seller_id}@example.com",
        skills=skills or [],
        categories=categories or [],
    )


def make_candidate(
    seller_id: str,
    score: int = 1,
    email: str | None = "",
    overlap: list[str] | None = None,
) -> RankedSeller:
    """Build a ranked seller.

    ``email=""`` derives an address from the id; pass None for a seller
    without email.
    """
    if email == "":
        email = f"{seller_id}@example.com"
    return RankedSeller(
        seller_id=SellerId(seller_id),
        name=seller_id.title(),
        email=email,
        score=score,
        overlap=overlap or [],
    )


def make_invitation(
    invitation_id: str,
    project_id: str = "p1",
    seller_id: str = "s1",
    status: InvitationStatus = InvitationStatus.SENT,
    created_at: datetime | None = None,
    **kwargs,
) -> Invitation:
    """Build a stored-looking invitation without going through the service."""
    return Invitation(
        id=InvitationId(invitation_id),
        project_id=ProjectId(project_id),
        project_title="Smart Irrigation",
        seller_id=SellerId(seller_id),
        seller_name=seller_id.title(),
        seller_email=f"{seller_id}@example.com",
        status=status,
        created_at=created_at or datetime(2024, 1, 1, 12, 0),
        accept_url=f"http://localhost:4000/api/invite/{invitation_id}/accept",
        reject_url=f"http://localhost:4000/api/invite/{invitation_id}/reject",
        **kwargs,
    )


# Keep spans local; nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)
