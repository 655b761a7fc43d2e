# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from tasker import configuration
from tasker.logging_setup import level_from_name, setup_logging
from tasker.repository.configuration import ConfigurationRepository
from tasker.repository.task import TaskRegistry
from tasker.view import state as view_state

logger = logging.getLogger(__name__)


def initialize(
    data_dir: Optional[Path] = None, verbose: bool = False
) -> tuple[configuration.Configuration, TaskRegistry]:
    """
    Prepare everything a command needs: config file, logging and a loaded
    task registry for the active store path.
    """
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_file()

    config_repo = ConfigurationRepository(configuration.APP_CONFIG_PATH)
    config = config_repo.get_config()
    config_repo.flush()

    console_level = (
        logging.DEBUG if verbose else level_from_name(config["log_level"])
    )
    setup_logging(log_dir=configuration.LOG_PATH, console_level=console_level)
    view_state.set_show_header(config["show_header"])

    tasks_path = configuration.resolve_tasks_path(config, data_dir)
    logger.debug("using task store %s", tasks_path)

    registry = TaskRegistry(tasks_path)
    registry.load()
    return config, registry


def __ensure_config_file() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(
            dump(config, Dumper=Dumper), encoding="utf-8"
        )
