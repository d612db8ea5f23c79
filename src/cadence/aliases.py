#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from typing import Annotated, Literal

from pydantic import Field

# weekday index where 0 is Sunday and 6 is Saturday
DayOfWeek = Annotated[int, Field(ge=0, le=6)]
# 1st to 4th occurrence of a weekday in a month, -1 for the last one
WeekOfMonth = Literal[1, 2, 3, 4, -1]
# day number within a month
DayOfMonth = Annotated[int, Field(ge=1, le=31)]
