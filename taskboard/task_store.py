"""Task records, filters and the in-memory task list store."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Mapping


class TaskStatus(str, Enum):
    ACTIVE = "Active"
    COMPLETED = "Completed"
    PAUSED = "Paused"


def _opt_int(value: Any) -> int | None:
    return None if value is None else int(value)


@dataclass
class Task:
    task_id: int = 0
    task_name: str = ""
    task_description: str | None = None
    task_keywords: set[str] = field(default_factory=set)
    task_priority: int = 0
    task_deadline: int | None = None
    task_complete_time: int | None = None
    task_status: TaskStatus = TaskStatus.ACTIVE
    task_create_time: int = 0
    task_leader_id: int = 0
    task_team_id: int | None = None
    task_update_time: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible mapping of this task."""
        return {
            "task_id": self.task_id,
            "task_name": self.task_name,
            "task_description": self.task_description,
            "task_keywords": sorted(self.task_keywords),
            "task_priority": self.task_priority,
            "task_deadline": self.task_deadline,
            "task_complete_time": self.task_complete_time,
            "task_status": self.task_status.value,
            "task_create_time": self.task_create_time,
            "task_leader_id": self.task_leader_id,
            "task_team_id": self.task_team_id,
            "task_update_time": self.task_update_time,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        """Build a task from a mapping; raises ValueError on malformed data."""
        try:
            description = data.get("task_description")
            return cls(
                task_id=int(data["task_id"]),
                task_name=str(data["task_name"]),
                task_description=None if description is None else str(description),
                task_keywords={str(k) for k in data["task_keywords"]},
                task_priority=int(data["task_priority"]),
                task_deadline=_opt_int(data.get("task_deadline")),
                task_complete_time=_opt_int(data.get("task_complete_time")),
                task_status=TaskStatus(data["task_status"]),
                task_create_time=int(data["task_create_time"]),
                task_leader_id=int(data["task_leader_id"]),
                task_team_id=_opt_int(data.get("task_team_id")),
                task_update_time=_opt_int(data.get("task_update_time")),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid task record: {exc!r}") from exc


@dataclass
class TaskFilters:
    status: TaskStatus | None = None
    priority_min: int | None = None
    priority_max: int | None = None
    team_id: int | None = None
    assignee_id: int | None = None
    has_deadline: bool | None = None
    search_query: str | None = None


@dataclass
class PaginationState:
    page: int = 1
    page_size: int = 20
    total: int = 0


@dataclass
class TaskListState:
    tasks: list[Task] = field(default_factory=list)
    filters: TaskFilters = field(default_factory=TaskFilters)
    pagination: PaginationState = field(default_factory=PaginationState)
    is_loading: bool = False
    error: str | None = None


def _matches(task: Task, filters: TaskFilters) -> bool:
    if filters.status is not None and task.task_status != filters.status:
        return False
    if filters.priority_min is not None and task.task_priority < filters.priority_min:
        return False
    if filters.priority_max is not None and task.task_priority > filters.priority_max:
        return False
    if filters.team_id is not None and task.task_team_id != filters.team_id:
        return False
    if filters.search_query is not None:
        query = filters.search_query.lower()
        in_name = query in task.task_name.lower()
        in_desc = task.task_description is not None and query in task.task_description.lower()
        if not (in_name or in_desc):
            return False
    return True


def filter_tasks(tasks: Iterable[Task], filters: TaskFilters) -> list[Task]:
    """Return the tasks that satisfy every set filter, in their original order."""
    return [task for task in tasks if _matches(task, filters)]


def _now_millis() -> int:
    return int(time.time() * 1000)


@dataclass
class TaskStore:
    """Holds the online task list together with its filters and paging."""

    state: TaskListState = field(default_factory=TaskListState)
    clock: Callable[[], int] = field(default=_now_millis, repr=False, compare=False)

    def _find(self, task_id: int) -> int | None:
        return next(
            (pos for pos, task in enumerate(self.state.tasks) if task.task_id == task_id),
            None,
        )

    def set_tasks(self, tasks: Iterable[Task], total: int) -> None:
        self.state.tasks = list(tasks)
        self.state.pagination.total = total
        self.state.is_loading = False
        self.state.error = None

    def set_loading(self, loading: bool) -> None:
        self.state.is_loading = loading
        if loading:
            self.state.error = None

    def set_error(self, error: str) -> None:
        self.state.error = error
        self.state.is_loading = False

    def add_task(self, task: Task) -> None:
        self.state.tasks.append(task)
        self.state.pagination.total += 1

    def update_task(self, task_id: int, updated: Task) -> None:
        pos = self._find(task_id)
        if pos is not None:
            self.state.tasks[pos] = updated

    def remove_task(self, task_id: int) -> None:
        self.state.tasks = [t for t in self.state.tasks if t.task_id != task_id]
        self.state.pagination.total = max(0, self.state.pagination.total - 1)

    def complete_task(self, task_id: int) -> None:
        pos = self._find(task_id)
        if pos is not None:
            task = self.state.tasks[pos]
            task.task_status = TaskStatus.COMPLETED
            task.task_complete_time = self.clock()

    def set_filter_status(self, status: TaskStatus | None) -> None:
        self.state.filters.status = status
        self.state.pagination.page = 1

    def set_filter_priority(self, min_priority: int | None, max_priority: int | None) -> None:
        self.state.filters.priority_min = min_priority
        self.state.filters.priority_max = max_priority
        self.state.pagination.page = 1

    def set_filter_team(self, team_id: int | None) -> None:
        self.state.filters.team_id = team_id
        self.state.pagination.page = 1

    def set_search_query(self, query: str | None) -> None:
        self.state.filters.search_query = query
        self.state.pagination.page = 1

    def set_page(self, page: int) -> None:
        self.state.pagination.page = page

    def set_page_size(self, page_size: int) -> None:
        self.state.pagination.page_size = page_size
        self.state.pagination.page = 1

    def clear_filters(self) -> None:
        self.state.filters = TaskFilters()
        self.state.pagination.page = 1

    def filtered_tasks(self) -> list[Task]:
        return filter_tasks(self.state.tasks, self.state.filters)