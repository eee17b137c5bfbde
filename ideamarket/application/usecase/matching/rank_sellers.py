"""Rank sellers use case."""

import logfire
from pydantic import BaseModel

from ideamarket.domain.model.project import Project
from ideamarket.domain.model.seller import SellerMatch, SellerProfile
from ideamarket.domain.service import rank_sellers


class RankSellersRequest(BaseModel):
    """Project and candidate sellers to score."""

    project: Project
    sellers: list[SellerProfile]


class RankSellersResponse(BaseModel):
    """Sellers ranked by match score, best first."""

    matches: list[SellerMatch]


class RankSellersUseCase:
    """Use case for ranking sellers against a project.

    Matching is pure; the result can be fed straight into notify sellers via
    SellerMatch.to_ranked_seller().
    """

    async def execute(self, request: RankSellersRequest) -> RankSellersResponse:
        with logfire.span(
            "rank_sellers",
            project_id=request.project.id,
            sellers=len(request.sellers),
        ):
            matches = rank_sellers(request.project, request.sellers)
            logfire.info(
                "Sellers ranked",
                project_id=request.project.id,
                top_score=matches[0].score if matches else None,
            )
            return RankSellersResponse(matches=matches)
