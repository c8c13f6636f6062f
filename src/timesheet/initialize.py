# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from timesheet import configuration
from timesheet.logger import configure_logging, get_logger
from timesheet.repository.configuration import CONFIGURATION_REPO
from timesheet.repository.fixture import load_fixture_time_entries
from timesheet.repository.time_entry import TIME_ENTRY_REPO
from timesheet.view import state as view_state

logger = get_logger(__name__)


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"], config["log_json"])
    view_state.set_show_header(config["show_header"])

    __ensure_data_files(config["seed_fixture"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_files(seed_fixture: bool) -> None:
    if not configuration.DATA_TIME_ENTRIES_DIR.is_dir():
        configuration.DATA_TIME_ENTRIES_DIR.mkdir(parents=True, exist_ok=True)
        if seed_fixture:
            TIME_ENTRY_REPO.import_entries(load_fixture_time_entries())
            logger.info(
                "seeded data directory",
                path=str(configuration.DATA_TIME_ENTRIES_DIR),
            )
