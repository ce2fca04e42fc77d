# taskboard

State and rules behind a task board for people and teams, with no
user interface attached. It keeps the lists of tasks and teams, tracks
who is signed in, stores tasks locally for offline work, remembers the
chosen colour theme, and provides paging and display helpers.

## What is inside

- `taskboard.storage`: key/value stores for persisted state,
  `MemoryStorage` (in memory) and `JsonFileStorage` (a JSON file on
  disk; a missing or unreadable file counts as empty).
- `taskboard.task_store`: `Task` (with `to_dict` / `from_dict`),
  `TaskStatus`, `TaskFilters`, `PaginationState`, `TaskListState`,
  `filter_tasks`, and `TaskStore` with filters, paging state and
  status changes.
- `taskboard.team_store`: `Team`, `TeamMember`, `TeamSettings`,
  `JoinRequest`, `TeamInvite`, their status enums and `TeamStore`,
  including `active_team` and `my_teams`.
- `taskboard.user_store`: `UserProfile`, `UserState`, `UserStore` and
  `create_user_store`, which restores a signed-in user from storage
  (both a token and a profile must be present).
- `taskboard.offline_task_store`: `OfflineTaskStore`, a local task list
  and offline-mode flag mirrored into storage, and
  `create_offline_task_store`. Operations on a task that does not exist
  record `"Task not found"` in the store's `state.error`.
- `taskboard.theme_store`: `Theme` (light, dark or system) and
  `ThemeStore`, created with `create_theme_store`; the chosen theme is
  persisted and resolved against the system preference.
- `taskboard.pagination`: `total_pages`, `clamp_page`, `take_page` and
  `clean_keywords`. A page size below one raises `ValueError`.
- `taskboard.task_view`: labels, CSS classes and progress percentages
  for task priorities and statuses, `format_timestamp` and `mock_task`.
- `taskboard.routes`: `require_auth`, `sign_out`, `profile_summary`
  and `not_found_message`.
- `taskboard.dashboard`: `EventFeed`, which keeps the five latest
  real-time events newest first, `ConnectionState`, `stat_label`,
  `payload_to_text`, `describe_state` and `greeting`.
- `taskboard.stores`: `Stores` and `create_stores`, which builds every
  store at once over one storage backend.

## Example

```python
from taskboard.storage import MemoryStorage
from taskboard.stores import create_stores
from taskboard.pagination import clamp_page, take_page

storage = MemoryStorage()
stores = create_stores(storage, prefers_dark=False)
print(stores.user.is_authenticated())   # False until someone signs in

task = stores.offline_task.new_task("Write report", None, ["work", " "], 4, None)
stores.offline_task.add_task(task)
print(task.task_keywords)               # {'work'}

items = list(range(45))
page = clamp_page(7, len(items), 20)    # 3
print(take_page(items, page, 20))       # [40, 41, 42, 43, 44]
```

Offline tasks, the offline-mode flag, the session and the theme choice
are written to the storage you pass in, so a `JsonFileStorage` keeps
them between runs.

## What it does not do

The package holds state only. It has no screens, no command-line
program, no HTTP client for a task server and no real-time connection;
the dashboard helpers format events you feed them. It does not check
sign-in or sign-up form input, and it has no helpers for searching
teams or building team-creation requests.