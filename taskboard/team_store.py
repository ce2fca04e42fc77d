"""Team records and the in-memory team list store."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class TeamVisibility(str, Enum):
    PUBLIC = "Public"
    PRIVATE = "Private"


class TeamStatus(str, Enum):
    ACTIVE = "Active"
    CLOSED = "Closed"


class RequestStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class InviteStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


@dataclass
class TeamSettings:
    team_description: str | None = None
    team_visibility: TeamVisibility = TeamVisibility.PRIVATE
    team_status: TeamStatus = TeamStatus.ACTIVE
    team_avatar: str | None = None
    team_member_limit: int = 0


@dataclass
class TeamMember:
    team_id: int | None = None
    sub_team_id: int | None = None
    user_id: int = 0
    level: int = 0
    join_time: int = 0


@dataclass
class Team:
    team_id: int = 0
    team_name: str = ""
    team_leader_id: int = 0
    team_members: list[TeamMember] = field(default_factory=list)
    team_create_time: int = 0
    sub_team_ids: list[int] = field(default_factory=list)
    team_settings: TeamSettings = field(default_factory=TeamSettings)


@dataclass
class JoinRequest:
    request_id: int
    team_id: int
    user_id: int
    request_time: int
    status: RequestStatus
    review_time: int | None = None
    reviewer_id: int | None = None
    review_message: str | None = None


@dataclass
class TeamInvite:
    invite_id: int
    team_id: int
    inviter_id: int
    invitee_id: list[int] | None
    create_time: int
    expire_time: int
    status: InviteStatus


@dataclass
class TeamListState:
    teams: list[Team] = field(default_factory=list)
    active_team_id: int | None = None
    join_requests: list[JoinRequest] = field(default_factory=list)
    invites: list[TeamInvite] = field(default_factory=list)
    is_loading: bool = False
    error: str | None = None


@dataclass
class TeamStore:
    """Holds the user's teams, join requests and invites."""

    state: TeamListState = field(default_factory=TeamListState)

    def _team(self, team_id: int) -> Team | None:
        return next((t for t in self.state.teams if t.team_id == team_id), None)

    def _team_index(self, team_id: int) -> int | None:
        return next(
            (pos for pos, t in enumerate(self.state.teams) if t.team_id == team_id),
            None,
        )

    def upsert_team(self, team: Team) -> None:
        pos = self._team_index(team.team_id)
        if pos is None:
            self.state.teams.append(team)
        else:
            self.state.teams[pos] = team
        self.state.active_team_id = team.team_id
        self.state.is_loading = False
        self.state.error = None

    def set_team_members(self, team_id: int, members: Iterable[TeamMember]) -> None:
        team = self._team(team_id)
        if team is not None:
            team.team_members = list(members)
            self.state.is_loading = False
            self.state.error = None

    def set_teams(self, teams: Iterable[Team]) -> None:
        self.state.teams = list(teams)
        self.state.is_loading = False
        self.state.error = None

    def set_loading(self, loading: bool) -> None:
        self.state.is_loading = loading
        if loading:
            self.state.error = None

    def set_error(self, error: str) -> None:
        self.state.error = error
        self.state.is_loading = False

    def add_team(self, team: Team) -> None:
        self.state.teams.append(team)

    def update_team(self, team_id: int, updated: Team) -> None:
        pos = self._team_index(team_id)
        if pos is not None:
            self.state.teams[pos] = updated

    def remove_team(self, team_id: int) -> None:
        self.state.teams = [t for t in self.state.teams if t.team_id != team_id]
        if self.state.active_team_id == team_id:
            self.state.active_team_id = None

    def set_active_team(self, team_id: int | None) -> None:
        self.state.active_team_id = team_id

    def active_team(self) -> Team | None:
        if self.state.active_team_id is None:
            return None
        return self._team(self.state.active_team_id)

    def add_member(self, team_id: int, member: TeamMember) -> None:
        team = self._team(team_id)
        if team is not None:
            team.team_members.append(member)

    def remove_member(self, team_id: int, user_id: int) -> None:
        team = self._team(team_id)
        if team is not None:
            team.team_members = [m for m in team.team_members if m.user_id != user_id]

    def update_member_role(self, team_id: int, user_id: int, level: int) -> None:
        team = self._team(team_id)
        if team is None:
            return
        member = next((m for m in team.team_members if m.user_id == user_id), None)
        if member is not None:
            member.level = level

    def set_join_requests(self, requests: Iterable[JoinRequest]) -> None:
        self.state.join_requests = list(requests)

    def set_invites(self, invites: Iterable[TeamInvite]) -> None:
        self.state.invites = list(invites)

    def update_request_status(self, request_id: int, status: RequestStatus) -> None:
        request = next(
            (r for r in self.state.join_requests if r.request_id == request_id), None
        )
        if request is not None:
            request.status = status

    def update_invite_status(self, invite_id: int, status: InviteStatus) -> None:
        invite = next((i for i in self.state.invites if i.invite_id == invite_id), None)
        if invite is not None:
            invite.status = status

    def my_teams(self, user_id: int) -> list[Team]:
        """Teams the user leads or belongs to."""
        return [
            team
            for team in self.state.teams
            if team.team_leader_id == user_id
            or any(m.user_id == user_id for m in team.team_members)
        ]