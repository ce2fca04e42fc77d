"""Construction of all client stores over one shared storage."""

from __future__ import annotations

from dataclasses import dataclass

from taskboard.offline_task_store import OfflineTaskStore, create_offline_task_store
from taskboard.storage import Storage
from taskboard.task_store import TaskStore
from taskboard.team_store import TeamStore
from taskboard.theme_store import ThemeStore, create_theme_store
from taskboard.user_store import UserStore, create_user_store


@dataclass
class Stores:
    theme: ThemeStore
    user: UserStore
    task: TaskStore
    offline_task: OfflineTaskStore
    team: TeamStore


def create_stores(storage: Storage, prefers_dark: bool) -> Stores:
    """Build every store, restoring persisted state from ``storage``."""
    return Stores(
        theme=create_theme_store(storage, prefers_dark),
        user=create_user_store(storage),
        task=TaskStore(),
        offline_task=create_offline_task_store(storage),
        team=TeamStore(),
    )