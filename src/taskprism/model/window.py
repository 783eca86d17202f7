# SPDX-License-Identifier: MIT

from typing import TypedDict


class Window(TypedDict):
    year: int
    month: int
    # 0 selects the whole month, N >= 1 the Nth display week
    week: int
