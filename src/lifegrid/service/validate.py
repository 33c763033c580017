# SPDX-License-Identifier: MIT

from lifegrid.error import InvalidConfiguration, MissingBirthdate
from lifegrid.model.lifespan_config import LifespanConfig

# Upper bound on generation work; the CLI clamps far below this
MAX_LIFE_EXPECTANCY = 1000


def validate_life_expectancy(life_expectancy: int) -> int:
    if isinstance(life_expectancy, bool) or not isinstance(life_expectancy, int):
        raise InvalidConfiguration(
            f"Life expectancy must be a whole number of years, got {life_expectancy!r}"
        )
    if life_expectancy <= 0:
        raise InvalidConfiguration(
            f"Life expectancy must be at least 1 year, got {life_expectancy}"
        )
    if life_expectancy > MAX_LIFE_EXPECTANCY:
        raise InvalidConfiguration(
            f"Life expectancy must be at most {MAX_LIFE_EXPECTANCY} years, got {life_expectancy}"
        )
    return life_expectancy


def validate_spacing(name: str, value: float) -> float:
    if value < 0:
        raise InvalidConfiguration(f"{name} must not be negative, got {value}")
    return value


def validate_unit_ratio(unit_ratio: float) -> float:
    if not (0 < unit_ratio <= 1):
        raise InvalidConfiguration(
            f"Unit ratio must be in (0, 1], got {unit_ratio}"
        )
    return unit_ratio


def validate_lifespan_config(config: LifespanConfig) -> None:
    """
    Check a configuration before it is committed for generation and layout.

    Raises:
        MissingBirthdate: If no birthdate is set
        InvalidConfiguration: If the life expectancy, spacing or unit ratio is out of range
    """
    if config["birthdate"] is None:
        raise MissingBirthdate()
    validate_life_expectancy(config["life_expectancy"])
    validate_spacing("Column spacing", config["col_spacing"])
    validate_spacing("Row spacing", config["row_spacing"])
    validate_spacing("Border spacing", config["border_spacing"])
    validate_unit_ratio(config["unit_ratio"])
