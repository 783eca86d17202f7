# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "taskprism"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class ColumnLayoutConfig(TypedDict):
    columns: list[str]
    fold: NotRequired[Optional[dict[str, str]]]
    fallback: NotRequired[Optional[str]]


class Configuration(TypedDict):
    timezone: str
    milestone_threshold_percent: float
    default_column_layout: str
    column_layouts: NotRequired[Optional[dict[str, ColumnLayoutConfig]]]
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "timezone": "UTC",
        "milestone_threshold_percent": 2.0,
        "default_column_layout": "full",
        "column_layouts": None,
        "log_level": "WARNING",
    }
