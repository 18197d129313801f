from enum import Enum


class Weekday(str, Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        """0 = Sunday ... 6 = Saturday."""
        return _BY_INDEX[index % 7]

    @classmethod
    def parse(cls, value) -> "Weekday":
        """
        Parse a weekday as stored on deal records.

        Accepts English names in any case and the numeric codes used by the
        business dashboard ("1" = Monday ... "7" = Sunday, "0" also Sunday).
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _BY_CODE:
            return _BY_CODE[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown weekday: {value!r}") from None


_BY_INDEX = [
    Weekday.SUNDAY,
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
]

_BY_CODE = {str(i): day for i, day in enumerate(_BY_INDEX)}
_BY_CODE["7"] = Weekday.SUNDAY
