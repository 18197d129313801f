import json
import sys
from typing import List

from pydantic import ValidationError

from config.logger import logger
from config.settings import POPULAR_DEALS_COUNT
from core.availability import (
    count_available,
    filter_available,
    is_claimable_today,
    is_currently_available,
    remaining_claims,
    time_until_end,
    time_until_start,
)
from core.clock import resolve_moment
from core.scoring import sort_by_availability_then_discount, top_popular
from models.deal import Deal
from utils.formatting import format_price

USAGE = "Usage: python main.py <deals.json> [list|available|popular]"

def load_deals(path: str) -> List[Deal]:
    """Load exported deal records, skipping the ones that fail validation."""
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError("expected a JSON array of deal records")

    deals = []
    for index, record in enumerate(records):
        try:
            deals.append(Deal.model_validate(record))
        except ValidationError as e:
            title = record.get("title", "?") if isinstance(record, dict) else "?"
            logger.warning(f"Skipping deal #{index} ({title}): {e.error_count()} error(s)")
            logger.debug(str(e))
    return deals

def describe_status(deal: Deal, moment) -> str:
    if is_currently_available(deal, moment):
        return time_until_end(deal, moment) or "Tilgjengelig"
    if is_claimable_today(deal, moment):
        return time_until_start(deal, moment) or "Senere i dag"
    return "Utløpt"

def render_deal_line(deal: Deal, moment) -> str:
    restaurant = deal.restaurant.name if deal.restaurant else "-"
    line = (
        f"{deal.title} @ {restaurant} | "
        f"{format_price(deal.final_price)} (-{deal.discount_percentage:g}%) | "
        f"{describe_status(deal, moment)}"
    )
    remaining = remaining_claims(deal)
    if remaining is not None:
        line += f" | {remaining}/{deal.total_limit} tilgjengelig"
    return line

def select_deals(deals: List[Deal], mode: str, moment) -> List[Deal]:
    if mode == "list":
        return sort_by_availability_then_discount(deals, moment)
    if mode == "available":
        return sort_by_availability_then_discount(filter_available(deals, moment), moment)
    if mode == "popular":
        return top_popular(deals, POPULAR_DEALS_COUNT, moment)
    raise ValueError(f"Unknown mode: {mode}")

def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv or len(argv) > 2:
        print(USAGE)
        return 2

    path = argv[0]
    mode = argv[1].lower() if len(argv) > 1 else "list"

    try:
        deals = load_deals(path)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read {path}: {e}")
        return 1

    moment = resolve_moment()
    try:
        selected = select_deals(deals, mode, moment)
    except ValueError as e:
        logger.error(str(e))
        print(USAGE)
        return 2

    logger.info(f"{len(deals)} deals loaded, {count_available(deals, moment)} available now")
    for deal in selected:
        print(render_deal_line(deal, moment))
    return 0

if __name__ == "__main__":
    sys.exit(main())
