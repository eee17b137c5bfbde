"""Seller profile entity."""

from pydantic import Field

from ideamarket.domain.model.common import DomainModel
from ideamarket.domain.value import SellerId


class SellerProfile(DomainModel):
    """A seller's declared qualifications.

    Maintained by the seller through the qualifications form in the client
    data store. This service only reads it for matching.
    """

    id: SellerId
    name: str = ""
    email: str = ""
    skills: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)


class RankedSeller(DomainModel):
    """A seller candidate as submitted for invitation, already scored."""

    seller_id: SellerId
    name: str = ""
    email: str | None = None
    score: float = 0
    overlap: list[str] = Field(default_factory=list)


class SellerMatch(DomainModel):
    """Result of matching one seller against a project."""

    seller: SellerProfile
    score: int
    overlap: list[str]
    category_match: bool

    def to_ranked_seller(self) -> RankedSeller:
        """Shape this match as a notify-sellers candidate."""
        return RankedSeller(
            seller_id=self.seller.id,
            name=self.seller.name,
            email=self.seller.email,
            score=self.score,
            overlap=list(self.overlap),
        )
