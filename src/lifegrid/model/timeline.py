# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class Timeline(TypedDict):
    birthdate: pendulum.Date
    life_expectancy: int
    days: list[pendulum.Date]
