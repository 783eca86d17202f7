# SPDX-License-Identifier: MIT

# Neutral color for statuses, task types and priorities the tables do not know
NEUTRAL_COLOR = "#CCCCCC"

OPEN_COLOR = "#FFD700"
IN_PROGRESS_COLOR = "#4169E1"
TESTING_COLOR = "#9370DB"
COMPLETED_COLOR = "#32CD32"
POSTPONED_COLOR = "#FF8C00"
CANCELLED_COLOR = "#808080"
OVERDUE_COLOR = "#DC143C"

# Task type accents
TASK_COLOR = "#89B4FA"
FEATURE_COLOR = "#A6E3A1"
BUG_COLOR = "#F38BA8"

# Priority accents
NORMAL_PRIORITY_COLOR = "#6C7086"
HIGH_PRIORITY_COLOR = "#FAB387"
URGENT_PRIORITY_COLOR = "#F38BA8"
