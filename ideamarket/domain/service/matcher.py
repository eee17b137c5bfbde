"""Seller matching.

Scores each seller by how many of the project's required skills they list,
plus one point when they serve the project's category.
"""

from collections.abc import Iterable

from ideamarket.domain.model.project import Project
from ideamarket.domain.model.seller import SellerMatch, SellerProfile


def _normalize(values: Iterable[str]) -> list[str]:
    """Lower-case and de-duplicate, keeping first-seen order."""
    seen: dict[str, None] = {}
    for value in values:
        seen.setdefault(str(value).lower(), None)
    return list(seen)


def match_seller(project: Project, seller: SellerProfile) -> SellerMatch:
    """Score a single seller against a project."""
    seller_skills = set(_normalize(seller.skills))
    seller_categories = set(_normalize(seller.categories))

    overlap = [skill for skill in _normalize(project.skills) if skill in seller_skills]
    category = project.category.lower()
    category_match = bool(category) and category in seller_categories

    return SellerMatch(
        seller=seller,
        score=len(overlap) + (1 if category_match else 0),
        overlap=overlap,
        category_match=category_match,
    )


def rank_sellers(
    project: Project, sellers: Iterable[SellerProfile]
) -> list[SellerMatch]:
    """Rank sellers for a project, best match first.

    Every seller appears in the result, including those scoring 0. The sort
    is stable, so equal scores keep the input order.

    Args:
        project: Project with required skills and category
        sellers: Candidate seller profiles

    Returns:
        Matches sorted by descending score
    """
    matches = [match_seller(project, seller) for seller in sellers]
    return sorted(matches, key=lambda m: m.score, reverse=True)
