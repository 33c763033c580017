# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum


class LifegridError(Exception):
    """Base class for every error raised by the lifespan core."""


class InvalidConfiguration(LifegridError):
    pass


class MissingBirthdate(LifegridError):
    def __init__(self, message: str = "No birthdate given") -> None:
        super().__init__(message)


class RangeOverflow(LifegridError):
    """
    Date arithmetic left the representable date range.

    Attributes:
        days: The days generated before the overflow, ending at the last
            representable day
    """

    def __init__(
        self, message: str, days: Optional[list[pendulum.Date]] = None
    ) -> None:
        super().__init__(message)
        self.days: list[pendulum.Date] = days if days is not None else []


class InvalidViewport(LifegridError):
    pass
