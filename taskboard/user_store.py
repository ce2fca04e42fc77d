"""Signed-in user profile and session persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping

from taskboard.storage import Storage

USER_KEY = "todo_user"
TOKEN_KEY = "todo_token"


def _opt(value: Any, kind: type) -> Any:
    return None if value is None else kind(value)


@dataclass
class UserProfile:
    user_id: int = 0
    username: str = ""
    email: str = ""
    phone: str = ""
    avatar: str | None = None
    description: str | None = None
    reg_time: int = 0
    last_login_time: int | None = None
    team_ids: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form, with the server's field names."""
        return {
            "user_id": self.user_id,
            "user_username": self.username,
            "user_email": self.email,
            "user_phone": self.phone,
            "user_avatar": self.avatar,
            "user_description": self.description,
            "user_reg_time": self.reg_time,
            "user_last_login_time": self.last_login_time,
            "user_teams": list(self.team_ids),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserProfile":
        """Build a profile from its wire form; raises ValueError on malformed data."""
        try:
            return cls(
                user_id=int(data["user_id"]),
                username=str(data["user_username"]),
                email=str(data["user_email"]),
                phone=str(data["user_phone"]),
                avatar=_opt(data.get("user_avatar"), str),
                description=_opt(data.get("user_description"), str),
                reg_time=int(data["user_reg_time"]),
                last_login_time=_opt(data.get("user_last_login_time"), int),
                team_ids=[int(t) for t in data["user_teams"]],
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid user profile: {exc!r}") from exc


@dataclass
class UserState:
    is_authenticated: bool = False
    profile: UserProfile | None = None
    token: str | None = None


class UserStore:
    """Session state of the signed-in user, mirrored into storage."""

    def __init__(self, storage: Storage, state: UserState | None = None) -> None:
        self.storage = storage
        self.state = state if state is not None else UserState()

    def _persist_profile(self) -> None:
        payload = None if self.state.profile is None else self.state.profile.to_dict()
        self.storage.set_item(USER_KEY, json.dumps(payload))

    def login(self, token: str, profile: UserProfile) -> None:
        self.state.is_authenticated = True
        self.state.token = token
        self.state.profile = profile
        self.storage.set_item(TOKEN_KEY, token)
        self._persist_profile()

    def logout(self) -> None:
        self.state = UserState()
        self.storage.remove_item(TOKEN_KEY)
        self.storage.remove_item(USER_KEY)

    def update_profile(self, profile: UserProfile) -> None:
        self.state.profile = profile
        self._persist_profile()

    def update_token(self, token: str) -> None:
        self.state.token = token
        self.storage.set_item(TOKEN_KEY, token)

    def is_authenticated(self) -> bool:
        return self.state.is_authenticated

    def token(self) -> str | None:
        return self.state.token

    def profile(self) -> UserProfile | None:
        return self.state.profile

    def user_id(self) -> int | None:
        return None if self.state.profile is None else self.state.profile.user_id


def _load_profile(raw: str | None) -> UserProfile | None:
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    try:
        return UserProfile.from_dict(data)
    except ValueError:
        return None


def create_user_store(storage: Storage) -> UserStore:
    """Restore the session from storage; both a token and a profile mean signed in."""
    token = storage.get_item(TOKEN_KEY)
    profile = _load_profile(storage.get_item(USER_KEY))
    state = UserState(
        is_authenticated=token is not None and profile is not None,
        profile=profile,
        token=token,
    )
    return UserStore(storage, state)