"""Domain value types for IdeaMarket.

Value types are immutable and defined by their values, not identity.
"""

from enum import Enum


class ProjectStatus(str, Enum):
    """Review status of a buyer's project, set by the admin."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SHORTLISTED = "shortlisted"
    ACCEPTED = "accepted"


class InvitationAction(str, Enum):
    """Actions that move an invitation between statuses."""

    ACCEPT = "accept"
    REJECT = "reject"
    OFFER = "offer"
    FAIL_DISPATCH = "fail_dispatch"


class InvitationStatus(str, Enum):
    """Lifecycle status of an invitation.

    draft -> sent -> accepted | rejected       (immediate send)
    draft -> offered -> accepted | rejected    (price attached first)
    sent | offered -> error                    (mail dispatch failed)

    accepted and rejected are terminal.
    """

    DRAFT = "draft"
    SENT = "sent"
    OFFERED = "offered"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (InvitationStatus.ACCEPTED, InvitationStatus.REJECTED)

    def next_status(self, action: InvitationAction) -> "InvitationStatus | None":
        """Return the status reached by applying an action, or None if illegal."""
        return _TRANSITIONS.get((self, action))


_OPEN = (InvitationStatus.DRAFT, InvitationStatus.SENT, InvitationStatus.OFFERED)

_TRANSITIONS: dict[tuple[InvitationStatus, InvitationAction], InvitationStatus] = {
    **{(s, InvitationAction.ACCEPT): InvitationStatus.ACCEPTED for s in _OPEN},
    **{(s, InvitationAction.REJECT): InvitationStatus.REJECTED for s in _OPEN},
    **{
        (s, InvitationAction.OFFER): InvitationStatus.OFFERED
        for s in (*_OPEN, InvitationStatus.ERROR)
    },
    (InvitationStatus.SENT, InvitationAction.FAIL_DISPATCH): InvitationStatus.ERROR,
    (InvitationStatus.OFFERED, InvitationAction.FAIL_DISPATCH): InvitationStatus.ERROR,
}
