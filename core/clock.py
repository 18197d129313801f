"""
Current-moment resolution for the availability checks.

Every evaluator accepts an optional moment. When it is omitted the moment
comes from a process-wide time provider, which tests replace with a fixed
clock through set_time_provider().
"""

from datetime import date, datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from config.settings import TIMEZONE
from models.weekday import Weekday

def wall_clock() -> datetime:
    if TIMEZONE:
        return datetime.now(ZoneInfo(TIMEZONE))
    return datetime.now()

_time_provider: Callable[[], datetime] = wall_clock

def set_time_provider(provider: Callable[[], datetime]):
    global _time_provider
    _time_provider = provider

def reset_time_provider():
    global _time_provider
    _time_provider = wall_clock

def now() -> datetime:
    return _time_provider()

def resolve_moment(moment: Optional[datetime] = None) -> datetime:
    if isinstance(moment, datetime):
        return moment
    return now()

def to_local(moment: date) -> date:
    """Aware moments are read in the configured zone; naive ones as given."""
    if TIMEZONE and isinstance(moment, datetime) and moment.tzinfo is not None:
        return moment.astimezone(ZoneInfo(TIMEZONE))
    return moment

def current_clock(moment: datetime) -> str:
    """HH:MM, zero padded, 24h."""
    return to_local(moment).strftime("%H:%M")

def weekday_name(moment: date) -> Weekday:
    # isoweekday: Monday=1 ... Sunday=7
    return Weekday.from_index(to_local(moment).isoweekday() % 7)
