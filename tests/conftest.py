# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Iterator

import pendulum
import pytest

from tasker import configuration
from tasker.repository.task import TaskRegistry

# Thursday
TODAY = pendulum.date(2017, 6, 15)


@pytest.fixture()
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> pendulum.Date:
    """Pin "today" so date expressions resolve deterministically."""
    monkeypatch.setattr("tasker.time.today", lambda: TODAY)
    return TODAY


@pytest.fixture()
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point config, log and data locations at a temporary directory.

    Returns the data directory; tasks.yaml lives directly inside it.
    """
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "LOG_PATH", tmp_path / "log")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.delenv(configuration.DATA_DIR_ENV_VAR, raising=False)
    return data_path


@pytest.fixture()
def registry(tmp_path: Path) -> TaskRegistry:
    registry = TaskRegistry(tmp_path / "tasks.yaml")
    registry.load()
    return registry


@pytest.fixture()
def new_york_local() -> Iterator[None]:
    """Make America/New_York the local time zone, four hours behind UTC in June."""
    with pendulum.test_local_timezone(pendulum.timezone("America/New_York")):
        yield
