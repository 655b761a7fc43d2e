# SPDX-License-Identifier: MIT

from pathlib import Path

import pendulum
import pytest
import yaml

from tasker.errors import InvalidRecurrenceSpec, NotFound
from tasker.repository.task import TaskRegistry


def reload(registry: TaskRegistry) -> TaskRegistry:
    fresh = TaskRegistry(registry.path)
    fresh.load()
    return fresh


def test_ids_start_at_zero_and_reuse_the_smallest_gap(registry: TaskRegistry) -> None:
    ids = [registry.create(name).id for name in ("a", "b", "c")]
    assert ids == [0, 1, 2]

    registry.remove(1)

    assert registry.create("d").id == 1
    assert registry.create("e").id == 3


def test_completed_tasks_keep_their_ids(registry: TaskRegistry) -> None:
    first = registry.create("a")
    first.complete()

    assert registry.create("b").id == 1


def test_purge_completed_frees_ids(registry: TaskRegistry) -> None:
    for name in ("a", "b", "c"):
        registry.create(name)
    registry.get(0).complete()
    registry.get(2).complete()

    assert registry.purge_completed() == 2
    assert [task.id for task in registry.tasks] == [1]
    assert registry.create("d").id == 0


def test_purge_with_nothing_completed(registry: TaskRegistry) -> None:
    registry.create("a")
    registry.save()

    assert registry.purge_completed() == 0
    assert registry.is_dirty is False


def test_remove_returns_the_task(registry: TaskRegistry) -> None:
    registry.create("a")
    task = registry.create("b")

    assert registry.remove(1) is task
    assert registry.get_by_id(1) is None
    assert len(registry.tasks) == 1


def test_remove_unknown_id_raises(registry: TaskRegistry) -> None:
    registry.create("a")

    with pytest.raises(NotFound) as exc_info:
        registry.remove(36)
    assert exc_info.value.task_id == 36
    assert str(exc_info.value) == "No task with id 10."
    assert len(registry.tasks) == 1


def test_get_by_id_never_raises(registry: TaskRegistry) -> None:
    assert registry.get_by_id(0) is None
    task = registry.create("a")
    assert registry.get_by_id(0) is task


def test_create_with_invalid_schedule_adds_nothing(registry: TaskRegistry) -> None:
    with pytest.raises(InvalidRecurrenceSpec):
        registry.create("a", due="2017-06-15", schedule="whenever")

    assert registry.tasks == []
    assert registry.is_dirty is False


def test_tags_are_indexed(registry: TaskRegistry) -> None:
    registry.create("a", tags=["work", "urgent"])
    task = registry.create("b", tags=["home"])
    task.tags = ["errands"]
    registry.index_tags(task)

    assert registry.tags == ["errands", "home", "urgent", "work"]


def test_tags_are_dropped_with_their_last_task(registry: TaskRegistry) -> None:
    registry.create("a", tags=["work", "home"])
    registry.create("b", tags=["work"]).complete()
    registry.create("c", tags=["errands"])

    registry.remove(2)
    assert registry.tags == ["home", "work"]

    registry.get(0).complete()
    registry.purge_completed()
    assert registry.tags == []


def test_save_and_load_round_trip(registry: TaskRegistry) -> None:
    registry.create("plain")
    registry.create("dated", due="2017-06-15")
    registry.create(
        "recurring", due="2017-06-16", schedule="1 week", tags=["home", "chores"]
    )
    done = registry.create("done", tags=["work"])
    done.complete()
    registry.save()

    loaded = reload(registry)

    assert [task.to_record() for task in loaded.tasks] == [
        task.to_record() for task in registry.tasks
    ]
    plain = loaded.get(0)
    assert plain.due is None
    assert plain.schedule is None
    assert plain.tags == []
    assert loaded.get(1).due == pendulum.date(2017, 6, 15)
    assert loaded.get(2).recurs is True
    assert loaded.get(2).tags == ["home", "chores"]
    assert loaded.get(3).completed is True
    assert loaded.tags == ["chores", "home", "work"]


def test_saved_records_omit_absent_fields(registry: TaskRegistry) -> None:
    registry.create("plain")
    registry.create("dated", due="2017-06-15", tags=["x"])
    registry.save()

    records = yaml.safe_load(registry.path.read_text())

    assert records[0] == {"id": 0, "name": "plain", "recurs": False, "completed": False}
    assert records[1] == {
        "id": 1,
        "name": "dated",
        "recurs": False,
        "completed": False,
        "due": "2017-06-15",
        "tags": ["x"],
    }


def test_load_missing_file_is_empty(tmp_path: Path) -> None:
    registry = TaskRegistry(tmp_path / "nested" / "tasks.yaml")
    registry.load()

    assert registry.tasks == []
    assert registry.flush() is False
    assert not registry.path.exists()


def test_load_empty_file_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "tasks.yaml"
    path.write_text("")

    registry = TaskRegistry(path)
    registry.load()

    assert registry.tasks == []


def test_load_rejects_non_list(tmp_path: Path) -> None:
    path = tmp_path / "tasks.yaml"
    path.write_text("tasks: []\n")

    with pytest.raises(ValueError):
        TaskRegistry(path).load()


def test_load_rejects_duplicate_ids(tmp_path: Path) -> None:
    path = tmp_path / "tasks.yaml"
    path.write_text(
        "- {id: 0, name: a, recurs: false, completed: false}\n"
        "- {id: 0, name: b, recurs: false, completed: false}\n"
    )

    with pytest.raises(ValueError):
        TaskRegistry(path).load()


def test_load_accepts_unquoted_dates(tmp_path: Path) -> None:
    path = tmp_path / "tasks.yaml"
    path.write_text(
        "- id: 4\n"
        "  name: hand edited\n"
        "  recurs: true\n"
        "  completed: false\n"
        "  due: 2017-06-15\n"
        "  schedule: 2 days\n"
    )

    registry = TaskRegistry(path)
    registry.load()

    task = registry.get(4)
    assert task.due == pendulum.date(2017, 6, 15)
    assert task.schedule == "2 days"
    assert registry.next_id() == 0


def test_tasks_property_loads_lazily(registry: TaskRegistry) -> None:
    registry.create("a")
    registry.save()

    lazy = TaskRegistry(registry.path)

    assert [task.name for task in lazy.tasks] == ["a"]


def test_flush_only_writes_when_dirty(registry: TaskRegistry) -> None:
    registry.create("a")
    assert registry.flush() is True
    assert registry.flush() is False

    registry.get(0).name = "renamed"
    registry.mark_dirty()
    assert registry.flush() is True
    assert reload(registry).get(0).name == "renamed"
