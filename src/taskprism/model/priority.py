# SPDX-License-Identifier: MIT

from enum import StrEnum


class Priority(StrEnum):
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    URGENT = "URGENT"
