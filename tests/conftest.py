import os
import tempfile
from datetime import datetime

import pytest

# Keep log files out of the working tree
os.environ.setdefault("DAGMAAL_LOG_DIR", tempfile.mkdtemp(prefix="dagmaal-logs-"))

from core import clock
from models.deal import Deal
from models.restaurant import Restaurant

# 2024-01-01 is a Monday
MONDAY = datetime(2024, 1, 1)
TUESDAY = datetime(2024, 1, 2)


def at(hour, minute=0, day=MONDAY):
    return day.replace(hour=hour, minute=minute)


def make_deal(**fields):
    data = {
        "title": "Dagens lunsj",
        "is_active": True,
        "available_days": [],
        "start_time": "10:00",
        "end_time": "14:00",
        "discount_percentage": 0,
        "claimed_count": 0,
        "original_price": 20000,
        "final_price": 15000,
    }
    data.update(fields)
    return Deal(**data)


def make_restaurant(**fields):
    data = {"name": "Fjordkroa", "categories": []}
    data.update(fields)
    return Restaurant(**data)


@pytest.fixture
def freeze_clock():
    """Pin the process-wide time provider to a fixed moment."""
    def _freeze(moment):
        clock.set_time_provider(lambda: moment)
        return moment

    yield _freeze
    clock.reset_time_provider()
