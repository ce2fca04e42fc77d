"""Dashboard helpers: statistic labels, the greeting and the real-time event feed."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from taskboard.user_store import UserProfile

FEED_LIMIT = 5
COUNT_MAX = 2**32 - 1
UNREADABLE_PAYLOAD = "unreadable payload"


class ConnectionState(str, Enum):
    """State of the real-time notification connection."""

    DISCONNECTED = "Disconnected"
    CONNECTING = "Connecting"
    OPEN = "Connected"
    CLOSED = "Closed"
    ERROR = "Error"


def stat_label(total: int) -> str:
    """Caption shown under a task total."""
    if total == 0:
        return "No data"
    if total == 1:
        return "One item"
    return "Items"


def payload_to_text(payload: Any) -> str:
    """Compact JSON text of an event payload, or a fixed note when it cannot be encoded."""
    try:
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError):
        return UNREADABLE_PAYLOAD


def describe_state(state: ConnectionState, message: str | None = None) -> str:
    """Status text for a connection state; errors carry their message."""
    if state is ConnectionState.ERROR:
        return f"Error: {message or ''}"
    return state.value


def greeting(overview_username: str | None, profile: UserProfile | None) -> str:
    """Welcome line, preferring the name from the overview, then the profile."""
    if overview_username is not None:
        name = overview_username
    elif profile is not None:
        name = profile.username
    else:
        name = "there"
    return f"Welcome, {name}"


@dataclass
class EventFeed:
    """The most recent real-time events, newest first, and how many arrived."""

    lines: list[str] = field(default_factory=list)
    count: int = 0
    limit: int = FEED_LIMIT

    def record(self, event: str, payload: Any) -> str:
        """Add an event to the top of the feed and return the line shown for it."""
        text = payload_to_text(payload)
        line = f"raw: {text}" if not event else f"{event}: {text}"
        self.lines.insert(0, line)
        del self.lines[self.limit :]
        self.count = min(COUNT_MAX, self.count + 1)
        return line