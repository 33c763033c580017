# SPDX-License-Identifier: MIT

import datetime
from typing import Callable, Optional, Union

import pendulum

Clock = Callable[[], pendulum.Date]


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def date_to_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_str(date)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_from_value(value: Union[str, datetime.date]) -> pendulum.Date:
    """Convert a 'YYYY-MM-DD' string or a date (as YAML loads unquoted dates) to a pendulum.Date."""
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    parsed = pendulum.parse(value, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if not isinstance(parsed, pendulum.Date):
        raise ValueError(f"Not a calendar date: {value}")
    return parsed


def date_from_value_optional(
    value: Optional[Union[str, datetime.date]],
) -> Optional[pendulum.Date]:
    if value is None:
        return None
    return date_from_value(value)


def days_between(start: pendulum.Date, end: pendulum.Date) -> int:
    """Signed number of days from start to end."""
    return end.toordinal() - start.toordinal()
