from datetime import date, datetime, timedelta
from typing import List, Optional

from config.settings import CLAIM_LOOKAHEAD_DAYS
from core.clock import current_clock, resolve_moment, to_local, weekday_name
from models.deal import Deal

def is_scheduled_for_day(deal: Deal, moment: Optional[datetime] = None) -> bool:
    if not deal.available_days:
        return True
    return weekday_name(resolve_moment(moment)) in deal.available_days

def is_claimable_today(deal: Deal, moment: Optional[datetime] = None) -> bool:
    """
    True if the deal can still be claimed today, including before its window
    opens (a pickup planned for later today).
    """
    moment = resolve_moment(moment)
    return (
        deal.is_active
        and is_scheduled_for_day(deal, moment)
        and current_clock(moment) <= deal.end_time[:5]
    )

def is_redeemable_now(deal: Deal, moment: Optional[datetime] = None) -> bool:
    """True only inside the deal's time window."""
    moment = resolve_moment(moment)
    return (
        is_claimable_today(deal, moment)
        and current_clock(moment) >= deal.start_time[:5]
    )

is_currently_available = is_redeemable_now

def time_until_start(deal: Deal, moment: Optional[datetime] = None) -> Optional[str]:
    moment = resolve_moment(moment)
    if is_currently_available(deal, moment):
        return None

    start = deal.start_time[:5]
    if current_clock(moment) < start:
        return f"Starter {start}"
    return None

def time_until_end(deal: Deal, moment: Optional[datetime] = None) -> Optional[str]:
    moment = resolve_moment(moment)
    if not is_currently_available(deal, moment):
        return None

    end = deal.end_time[:5]
    if current_clock(moment) < end:
        return f"Slutter {end}"
    return None

def count_available(deals: List[Deal], moment: Optional[datetime] = None) -> int:
    moment = resolve_moment(moment)
    return sum(1 for deal in deals if is_currently_available(deal, moment))

def filter_available(deals: List[Deal], moment: Optional[datetime] = None) -> List[Deal]:
    moment = resolve_moment(moment)
    return [deal for deal in deals if is_currently_available(deal, moment)]

def filter_unavailable(deals: List[Deal], moment: Optional[datetime] = None) -> List[Deal]:
    moment = resolve_moment(moment)
    return [deal for deal in deals if not is_currently_available(deal, moment)]

def remaining_claims(deal: Deal) -> Optional[int]:
    """Claims left under total_limit, or None when the deal is unlimited."""
    if deal.total_limit is None:
        return None
    return max(0, deal.total_limit - deal.claimed_count)

def is_sold_out(deal: Deal) -> bool:
    return remaining_claims(deal) == 0

def next_claim_date(deal: Deal, moment: Optional[datetime] = None) -> date:
    """
    First day a pickup can be scheduled for.

    Walks forward from today, skipping days outside start_date..end_date,
    weekdays the deal doesn't run on, and today once its window has closed.
    Falls back to today if nothing matches within the lookahead.
    """
    moment = to_local(resolve_moment(moment))
    today = moment.date()
    closed_today = current_clock(moment) > deal.end_time[:5]

    for offset in range(CLAIM_LOOKAHEAD_DAYS):
        candidate = today + timedelta(days=offset)

        if deal.start_date and candidate < deal.start_date:
            continue
        if deal.end_date and candidate > deal.end_date:
            continue
        if deal.available_days and weekday_name(candidate) not in deal.available_days:
            continue
        if offset == 0 and closed_today:
            continue

        return candidate

    return today
