"""Locally persisted personal tasks used while working offline."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable

from taskboard.storage import Storage
from taskboard.task_store import Task, TaskFilters, TaskStatus, filter_tasks

OFFLINE_TASKS_KEY = "todo_offline_tasks_v1"
OFFLINE_MODE_KEY = "todo_offline_mode_v1"

_U64_MAX = 2**64 - 1


@dataclass
class OfflineTaskState:
    enabled: bool = False
    tasks: list[Task] = field(default_factory=list)
    error: str | None = None


class OfflineTaskStore:
    """Offline task list whose tasks and mode flag are mirrored into storage."""

    def __init__(
        self,
        storage: Storage,
        state: OfflineTaskState | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.storage = storage
        self.state = state if state is not None else OfflineTaskState()
        self.clock = clock

    def _persist(self) -> None:
        payload = json.dumps([task.to_dict() for task in self.state.tasks])
        self.storage.set_item(OFFLINE_TASKS_KEY, payload)
        self.storage.set_item(OFFLINE_MODE_KEY, "true" if self.state.enabled else "false")

    def _now_seconds(self) -> int:
        return int(self.clock())

    def _find(self, task_id: int) -> int | None:
        return next(
            (pos for pos, task in enumerate(self.state.tasks) if task.task_id == task_id),
            None,
        )

    def set_enabled(self, enabled: bool) -> None:
        self.state.enabled = enabled
        self.state.error = None
        self._persist()

    def is_enabled(self) -> bool:
        return self.state.enabled

    def set_error(self, error: str) -> None:
        self.state.error = error

    def add_task(self, task: Task) -> None:
        self.state.tasks.append(task)
        self.state.error = None
        self._persist()

    def update_task(self, task_id: int, updated: Task) -> None:
        """Replace a task; a missing task is recorded as an error in the state."""
        pos = self._find(task_id)
        if pos is None:
            self.state.error = "Task not found"
            return
        self.state.tasks[pos] = updated
        self.state.error = None
        self._persist()

    def delete_task(self, task_id: int) -> None:
        self.state.tasks = [t for t in self.state.tasks if t.task_id != task_id]
        self.state.error = None
        self._persist()

    def set_task_status(self, task_id: int, status: TaskStatus) -> None:
        """Change a task's status; a missing task is recorded as an error in the state."""
        pos = self._find(task_id)
        if pos is None:
            self.state.error = "Task not found"
            return
        task = self.state.tasks[pos]
        task.task_status = status
        task.task_update_time = self._now_seconds()
        self.state.error = None
        self._persist()

    def filtered_tasks(self, filters: TaskFilters) -> list[Task]:
        return filter_tasks(self.state.tasks, filters)

    def new_task(
        self,
        name: str,
        description: str | None,
        keywords: Iterable[str],
        priority: int,
        deadline: int | None,
    ) -> Task:
        """Build a fresh active task with a locally generated id (not yet added)."""
        keyword_set = {key.strip() for key in keywords if key.strip()}
        return Task(
            task_id=self._next_id(),
            task_name=name,
            task_description=description,
            task_keywords=keyword_set,
            task_priority=priority,
            task_deadline=deadline,
            task_complete_time=None,
            task_status=TaskStatus.ACTIVE,
            task_create_time=self._now_seconds(),
            task_leader_id=0,
            task_team_id=None,
            task_update_time=None,
        )

    def _next_id(self) -> int:
        now_millis = int(self.clock() * 1000)
        count = len(self.state.tasks)
        return min(_U64_MAX, now_millis * 10_000 + count + 1)


def _load_tasks(raw: str | None) -> list[Task]:
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return []
    if not isinstance(data, list):
        return []
    try:
        return [Task.from_dict(item) for item in data]
    except (ValueError, AttributeError):
        return []


def create_offline_task_store(storage: Storage) -> OfflineTaskStore:
    """Restore the offline tasks and mode flag from storage."""
    tasks = _load_tasks(storage.get_item(OFFLINE_TASKS_KEY))
    mode = storage.get_item(OFFLINE_MODE_KEY)
    enabled = mode is not None and mode.lower() == "true"
    return OfflineTaskStore(storage, OfflineTaskState(enabled=enabled, tasks=tasks))