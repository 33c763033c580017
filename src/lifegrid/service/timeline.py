# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from lifegrid.error import MissingBirthdate, RangeOverflow
from lifegrid.model.timeline import Timeline
from lifegrid.service.validate import validate_life_expectancy
from lifegrid.time import date_to_str, days_between

logger = logging.getLogger(__name__)

LAST_REPRESENTABLE_DAY = pendulum.date(9999, 12, 31)


def anniversary(birthdate: pendulum.Date, years: int) -> Optional[pendulum.Date]:
    """
    Get the birthdate shifted by a number of years.

    Always counted from the birthdate itself, so a Feb 29 birthdate lands on
    Feb 28 in common years and on Feb 29 again in leap years.

    Returns:
        The anniversary, or None if it lies past the representable date range
    """
    try:
        return birthdate.add(years=years)
    except (OverflowError, ValueError):
        return None


def ends_on_last_representable_day(birthdate: pendulum.Date, years: int) -> bool:
    """Whether the exclusive end anniversary is the first unrepresentable day."""
    return birthdate.year + years == 10000 and (birthdate.month, birthdate.day) == (1, 1)


def lifespan_day_count(birthdate: pendulum.Date, life_expectancy: int) -> int:
    """Count the days from the birthdate to the end of the life expectancy."""
    end = anniversary(birthdate, life_expectancy)
    if end is None and ends_on_last_representable_day(birthdate, life_expectancy):
        return days_between(birthdate, LAST_REPRESENTABLE_DAY) + 1
    if end is None:
        raise RangeOverflow(
            f"Life expectancy of {life_expectancy} years from {date_to_str(birthdate)} "
            "ends past the last representable date"
        )
    return days_between(birthdate, end)


def generate_timeline(
    birthdate: Optional[pendulum.Date], life_expectancy: int
) -> Timeline:
    """
    Generate every calendar day of a lifespan.

    Walks anniversary to anniversary, taking the length of each year from the
    dates themselves rather than assuming 365 or 366 days, and emits one day
    at a time until the running offset reaches the accumulated total.

    Args:
        birthdate: First day of the lifespan
        life_expectancy: Length of the lifespan in whole years

    Returns:
        A new Timeline whose days are unique and strictly increasing

    Raises:
        MissingBirthdate: If birthdate is None
        InvalidConfiguration: If life_expectancy is not a positive number of years
        RangeOverflow: If the lifespan runs past the representable date range;
            the days up to the last representable day are attached to the error
    """
    if birthdate is None:
        raise MissingBirthdate()
    validate_life_expectancy(life_expectancy)

    days: list[pendulum.Date] = []
    current = birthdate
    offset = 0
    expectancy_day_count = 0
    previous_anniversary = birthdate

    for years in range(1, life_expectancy + 1):
        next_anniversary = anniversary(birthdate, years)
        if next_anniversary is None:
            # Emit through the last representable day, then overflow below
            span = days_between(previous_anniversary, LAST_REPRESENTABLE_DAY) + 1
        else:
            span = days_between(previous_anniversary, next_anniversary)
        expectancy_day_count += span

        for _ in range(span):
            if offset >= expectancy_day_count:
                break
            days.append(current)
            offset += 1
            if current == LAST_REPRESENTABLE_DAY:
                break
            current = current.add(days=1)

        if next_anniversary is None:
            if years == life_expectancy and ends_on_last_representable_day(
                birthdate, years
            ):
                break
            logger.debug(
                "Timeline stopped at %s after %d days",
                date_to_str(current),
                len(days),
            )
            raise RangeOverflow(
                f"Lifespan from {date_to_str(birthdate)} runs past "
                f"{date_to_str(LAST_REPRESENTABLE_DAY)}",
                days=days,
            )
        previous_anniversary = next_anniversary

    logger.debug(
        "Generated %d days from %s over %d years",
        len(days),
        date_to_str(birthdate),
        life_expectancy,
    )

    return {
        "birthdate": birthdate,
        "life_expectancy": life_expectancy,
        "days": days,
    }
