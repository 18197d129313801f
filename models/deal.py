from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from typing import List, Optional
from datetime import date

from models.restaurant import Restaurant
from models.weekday import Weekday

class Deal(BaseModel):
    """
    A time-windowed menu offer, as exported from the data store.

    Prices are integer øre. Only the first 5 characters (HH:MM) of
    start_time/end_time are significant.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: str = ""
    description: Optional[str] = None
    is_active: bool = True
    available_days: List[Weekday] = []  # empty = every day
    start_time: str
    end_time: str
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    discount_percentage: float = 0
    claimed_count: int = 0
    total_limit: Optional[int] = None
    per_user_limit: int = 1
    original_price: int = 0
    final_price: int = 0
    dietary_info: List[str] = []
    restaurant: Optional[Restaurant] = None

    @field_validator("available_days", mode="before")
    @classmethod
    def parse_days(cls, value):
        if value is None:
            return []
        return [Weekday.parse(day) for day in value]

    @model_validator(mode="after")
    def reject_overnight_window(self):
        # Windows crossing midnight are not supported
        if self.end_time[:5] < self.start_time[:5]:
            raise ValueError(
                f"end_time {self.end_time} is before start_time {self.start_time}"
            )
        return self
