"""Matching use cases."""

from ideamarket.application.usecase.matching.rank_sellers import (
    RankSellersRequest,
    RankSellersResponse,
    RankSellersUseCase,
)

__all__ = [
    "RankSellersRequest",
    "RankSellersResponse",
    "RankSellersUseCase",
]
