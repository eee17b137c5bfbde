"""Matching routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ideamarket.application.usecase.matching import (
    RankSellersRequest,
    RankSellersResponse,
    RankSellersUseCase,
)
from ideamarket.domain.model.project import Project
from ideamarket.domain.model.seller import SellerProfile

router = APIRouter(prefix="/api", tags=["matching"], route_class=DishkaRoute)


class RankSellersAPIRequest(BaseModel):
    """API request for ranking sellers."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project: Project
    sellers: list[SellerProfile]


@router.post("/match", response_model=RankSellersResponse)
async def match_sellers(
    request: RankSellersAPIRequest,
    rank_sellers_use_case: FromDishka[RankSellersUseCase],
) -> RankSellersResponse:
    """Rank sellers against a project by skill and category overlap.

    Args:
        request: Project and candidate sellers
        rank_sellers_use_case: Rank sellers use case from DI

    Returns:
        Every seller with score, overlap and category match, best first
    """
    return await rank_sellers_use_case.execute(
        RankSellersRequest(project=request.project, sellers=request.sellers)
    )
