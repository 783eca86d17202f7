# SPDX-License-Identifier: MIT

from enum import StrEnum


class TaskStatus(StrEnum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    TESTING = "TESTING"
    COMPLETED = "COMPLETED"
    POSTPONED = "POSTPONED"
    CANCELLED = "CANCELLED"
    OVERDUE = "OVERDUE"


KNOWN_STATUSES: frozenset[str] = frozenset(status.value for status in TaskStatus)

# Statuses the nightly overdue job never touches
OVERDUE_EXEMPT_STATUSES: frozenset[str] = frozenset(
    {
        TaskStatus.COMPLETED,
        TaskStatus.CANCELLED,
        TaskStatus.TESTING,
        TaskStatus.OVERDUE,
    }
)

CLOSED_STATUSES: frozenset[str] = frozenset(
    {TaskStatus.COMPLETED, TaskStatus.CANCELLED}
)
