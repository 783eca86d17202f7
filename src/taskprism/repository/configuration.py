# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskprism import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        if configuration.APP_CONFIG_PATH.is_file():
            self._config = load(
                configuration.APP_CONFIG_PATH.read_text(), Loader=Loader
            )
        if self._config is None:
            self._config = configuration.get_default_configuration()
            return

        # Fill in settings added after the file was written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        timezone: Optional[str] = None,
        milestone_threshold_percent: Optional[float] = None,
        default_column_layout: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if timezone is not None:
            self.config["timezone"] = timezone
        if milestone_threshold_percent is not None:
            self.config["milestone_threshold_percent"] = milestone_threshold_percent
        if default_column_layout is not None:
            self.config["default_column_layout"] = default_column_layout
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
