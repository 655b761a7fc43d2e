# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "tasker"

# Overrides both the config file and the platform default
DATA_DIR_ENV_VAR = "TASKER_DATA_DIR"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

LOG_PATH: Path = platformdirs.user_log_path(APP_NAME)

DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
TASKS_FILE_NAME = "tasks.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    log_level: str
    date_format: str
    show_header: bool


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "log_level": "WARNING",
        "date_format": "YYYY-MM-DD ddd",
        "show_header": True,
    }


def resolve_data_path(
    config: Configuration, override: Optional[Path] = None
) -> Path:
    """
    Resolve the directory holding the task store.

    Precedence: explicit override (the --data-dir option), the TASKER_DATA_DIR
    environment variable, the data_path config setting, then the platform
    default data directory.
    """
    if override is not None:
        return override.expanduser()

    env_data_path = os.environ.get(DATA_DIR_ENV_VAR)
    if env_data_path is not None and env_data_path.strip() != "":
        return Path(env_data_path).expanduser()

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        return Path(data_path_setting).expanduser()

    return DATA_PATH


def resolve_tasks_path(
    config: Configuration, override: Optional[Path] = None
) -> Path:
    return resolve_data_path(config, override) / TASKS_FILE_NAME
