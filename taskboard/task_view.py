"""Display helpers for a single task: labels, CSS classes, progress and dates."""

from __future__ import annotations

from datetime import datetime

from taskboard.task_store import Task, TaskStatus

_STATUS_CLASSES = {
    TaskStatus.ACTIVE: "status-active",
    TaskStatus.COMPLETED: "status-completed",
    TaskStatus.PAUSED: "status-paused",
}

_STATUS_PROGRESS = {
    TaskStatus.ACTIVE: 33,
    TaskStatus.PAUSED: 50,
    TaskStatus.COMPLETED: 100,
}


def format_timestamp(ts: int) -> str:
    """Render a Unix timestamp in seconds as a local YYYY/MM/DD date."""
    return datetime.fromtimestamp(ts).strftime("%Y/%m/%d")


def _priority_band(priority: int) -> str:
    if priority <= 2:
        return "Low"
    if priority <= 5:
        return "Medium"
    if priority <= 8:
        return "High"
    return "Urgent"


def priority_label(priority: int) -> str:
    return _priority_band(priority)


def priority_class(priority: int) -> str:
    return f"priority-{_priority_band(priority).lower()}"


def status_label(status: TaskStatus) -> str:
    return status.value


def status_class(status: TaskStatus) -> str:
    return _STATUS_CLASSES[status]


def status_progress(status: TaskStatus) -> int:
    """Percentage shown on the progress bar for a status."""
    return _STATUS_PROGRESS[status]


def mock_task(task_id: int) -> Task:
    """Placeholder task shown before real data is loaded."""
    return Task(
        task_id=task_id,
        task_name=f"Sample Task #{task_id}",
        task_description="This is a placeholder task. Wire up the API to load real data.",
        task_keywords={"example", "mock"},
        task_priority=3,
        task_deadline=1_800_000_000,
        task_status=TaskStatus.ACTIVE,
        task_create_time=1_700_000_000,
        task_leader_id=1,
        task_team_id=None,
        task_update_time=None,
        task_complete_time=None,
    )