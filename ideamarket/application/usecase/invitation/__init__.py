"""Invitation use cases."""

from ideamarket.application.usecase.invitation.get_invitations import (
    GetProjectInvitationsRequest,
    GetProjectInvitationsUseCase,
    GetSellerInvitationsRequest,
    GetSellerInvitationsUseCase,
    InvitationListResponse,
)
from ideamarket.application.usecase.invitation.make_offer import (
    MakeOfferRequest,
    MakeOfferUseCase,
)
from ideamarket.application.usecase.invitation.notify_sellers import (
    NotifySellersRequest,
    NotifySellersResponse,
    NotifySellersUseCase,
)
from ideamarket.application.usecase.invitation.respond_to_invitation import (
    InvitationResponse,
    RespondToInvitationRequest,
    RespondToInvitationUseCase,
)

__all__ = [
    "GetProjectInvitationsRequest",
    "GetProjectInvitationsUseCase",
    "GetSellerInvitationsRequest",
    "GetSellerInvitationsUseCase",
    "InvitationListResponse",
    "InvitationResponse",
    "MakeOfferRequest",
    "MakeOfferUseCase",
    "NotifySellersRequest",
    "NotifySellersResponse",
    "NotifySellersUseCase",
    "RespondToInvitationRequest",
    "RespondToInvitationUseCase",
]
