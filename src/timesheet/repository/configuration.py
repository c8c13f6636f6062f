# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timesheet import configuration


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
        loaded: Optional[configuration.Configuration] = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Fill in any setting missing from an older config file
        self._config = configuration.get_default_configuration()
        if loaded is not None:
            self._config.update(loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        storage: Optional[configuration.StorageType] = None,
        seed_fixture: Optional[bool] = None,
        log_level: Optional[str] = None,
        log_json: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        export_path: Optional[str] = None,
        remove_export_path: bool = False,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if storage is not None:
            self.config["storage"] = storage
        if seed_fixture is not None:
            self.config["seed_fixture"] = seed_fixture
        if log_level is not None:
            self.config["log_level"] = log_level.upper()
        if log_json is not None:
            self.config["log_json"] = log_json
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if export_path is not None:
            self.config["export_path"] = export_path
        if remove_export_path:
            self.config["export_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()
