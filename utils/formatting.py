from core.pricing import round_half_up
from models.weekday import Weekday

NBSP = "\u00a0"

DAY_LABELS = {
    Weekday.SUNDAY: "Søndag",
    Weekday.MONDAY: "Mandag",
    Weekday.TUESDAY: "Tirsdag",
    Weekday.WEDNESDAY: "Onsdag",
    Weekday.THURSDAY: "Torsdag",
    Weekday.FRIDAY: "Fredag",
    Weekday.SATURDAY: "Lørdag",
}

def format_price(price_ore) -> str:
    """Øre to whole kroner, e.g. 150000 -> 'kr 1 500' (non-breaking spaces)."""
    kroner = round_half_up(price_ore / 100)
    sign = "-" if kroner < 0 else ""
    grouped = f"{abs(kroner):,}".replace(",", NBSP)
    return f"{sign}kr{NBSP}{grouped}"

def format_time(time: str) -> str:
    return time[:5]

def day_label(day) -> str:
    return DAY_LABELS[Weekday.parse(day)]
