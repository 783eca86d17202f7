# SPDX-License-Identifier: MIT

from enum import StrEnum


class TaskType(StrEnum):
    TASK = "TASK"
    FEATURE = "FEATURE"
    BUG = "BUG"
