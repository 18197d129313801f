"""
Search and filter for the deal list.
Mirrors the filter sheet on the home screen: free-text search, cuisine,
dietary and price range, followed by the chosen ordering.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from config.logger import logger
from core.clock import resolve_moment
from core.scoring import sort_by_availability_then_discount
from models.deal import Deal

SORT_HIGHEST_DISCOUNT = "highest_discount"
SORT_LOWEST_PRICE = "lowest_price"

@dataclass
class DealFilters:
    query: str = ""
    cuisines: List[str] = field(default_factory=list)
    dietary: List[str] = field(default_factory=list)
    min_price: Optional[int] = None  # øre, inclusive
    max_price: Optional[int] = None  # øre, inclusive
    sort: Optional[str] = None  # None = availability, then discount

def matches_query(deal: Deal, query: str) -> bool:
    """
    Case-insensitive match on deal title and restaurant name, description
    and categories.
    """
    query = query.strip().lower()
    if not query:
        return True

    if query in deal.title.lower():
        return True

    restaurant = deal.restaurant
    if restaurant is None:
        return False

    if query in restaurant.name.lower():
        return True
    if restaurant.description and query in restaurant.description.lower():
        return True
    return any(query in category.lower() for category in restaurant.categories)

def matches_cuisine(deal: Deal, cuisines: List[str]) -> bool:
    if not cuisines:
        return True
    if deal.restaurant is None:
        return False
    return any(category in cuisines for category in deal.restaurant.categories)

def matches_dietary(deal: Deal, dietary: List[str]) -> bool:
    if not dietary:
        return True
    return any(diet in dietary for diet in deal.dietary_info)

def matches_price(deal: Deal, min_price: Optional[int], max_price: Optional[int]) -> bool:
    if min_price is not None and deal.final_price < min_price:
        return False
    if max_price is not None and deal.final_price > max_price:
        return False
    return True

def sort_deals(deals: List[Deal], sort: Optional[str] = None, moment: Optional[datetime] = None) -> List[Deal]:
    if sort == SORT_HIGHEST_DISCOUNT:
        return sorted(deals, key=lambda d: d.discount_percentage, reverse=True)
    if sort == SORT_LOWEST_PRICE:
        return sorted(deals, key=lambda d: d.final_price)
    if sort is not None:
        raise ValueError(f"Unknown sort option: {sort!r}")
    return sort_by_availability_then_discount(deals, moment)

def apply_filters(deals: List[Deal], filters: DealFilters, moment: Optional[datetime] = None) -> List[Deal]:
    """
    Apply every active filter, then order the result.

    Args:
        deals: Deals as loaded from the data store
        filters: Selected filters
        moment: Moment used for availability ordering (defaults to now)

    Returns:
        Filtered and sorted list of deals
    """
    moment = resolve_moment(moment)
    result = list(deals)

    if filters.query.strip():
        result = [d for d in result if matches_query(d, filters.query)]
        logger.debug(f"Search '{filters.query}': {len(result)} deals")

    if filters.cuisines:
        result = [d for d in result if matches_cuisine(d, filters.cuisines)]
        logger.debug(f"Cuisine filter {filters.cuisines}: {len(result)} deals")

    if filters.dietary:
        result = [d for d in result if matches_dietary(d, filters.dietary)]
        logger.debug(f"Dietary filter {filters.dietary}: {len(result)} deals")

    if filters.min_price is not None or filters.max_price is not None:
        result = [d for d in result if matches_price(d, filters.min_price, filters.max_price)]
        logger.debug(f"Price filter {filters.min_price}-{filters.max_price}: {len(result)} deals")

    return sort_deals(result, filters.sort, moment)
