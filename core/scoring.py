from datetime import datetime
from typing import List, Optional

from config.settings import (
    POPULAR_DEALS_COUNT,
    POPULARITY_AVAILABILITY_BONUS,
    POPULARITY_CLAIMS_WEIGHT,
    POPULARITY_DISCOUNT_WEIGHT,
)
from core.availability import is_currently_available
from core.clock import resolve_moment
from models.deal import Deal

def popularity_score(deal: Deal, moment: Optional[datetime] = None) -> float:
    score = 0

    # --- FACTOR 1: DISCOUNT (weighted heavily) ---
    score += deal.discount_percentage * POPULARITY_DISCOUNT_WEIGHT

    # --- FACTOR 2: CLAIMS (weighted moderately) ---
    score += deal.claimed_count * POPULARITY_CLAIMS_WEIGHT

    # --- FACTOR 3: LIVE RIGHT NOW ---
    # Flat bonus, strong but not absolute against a large discount.
    if is_currently_available(deal, moment):
        score += POPULARITY_AVAILABILITY_BONUS

    return score

def top_popular(
    deals: List[Deal],
    count: int = POPULAR_DEALS_COUNT,
    moment: Optional[datetime] = None,
) -> List[Deal]:
    """Most popular deals first. Equal scores keep their input order."""
    moment = resolve_moment(moment)
    ranked = sorted(deals, key=lambda d: popularity_score(d, moment), reverse=True)
    return ranked[:count]

def sort_by_availability_then_discount(
    deals: List[Deal],
    moment: Optional[datetime] = None,
) -> List[Deal]:
    """
    Canonical deal list ordering: live deals first, then highest discount.
    Single stable sort, so equal-rank deals keep their input order.
    """
    moment = resolve_moment(moment)
    return sorted(
        deals,
        key=lambda d: (not is_currently_available(d, moment), -d.discount_percentage),
    )
