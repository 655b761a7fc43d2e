# SPDX-License-Identifier: MIT

from typing import TypeAlias

TaskId: TypeAlias = int

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(task_id: TaskId) -> str:
    if task_id < 0:
        raise ValueError(f"task id must be non-negative, got {task_id}")
    if task_id == 0:
        return "0"
    digits = []
    while task_id > 0:
        task_id, remainder = divmod(task_id, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def from_base36(text: str) -> TaskId:
    """Parse a user-facing base-36 id. Raises ValueError on malformed input."""
    value = int(text.strip(), 36)
    if value < 0:
        raise ValueError(f"task id must be non-negative, got {text}")
    return value
