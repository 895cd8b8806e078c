"""Team roles and case-insensitive role-name lookup."""

from __future__ import annotations

import enum
from typing import Dict

from teamkit_cli.core.errors import InvalidRoleError


class TeamRole(str, enum.Enum):
    """Roles a member can hold within a team."""
    OWNER = "owner"
    ADMIN = "admin"
    WRITER = "writer"
    READER = "reader"


# Upper-case canonical name -> role. The only place roles are enumerated.
TEAM_ROLE_MAP: Dict[str, TeamRole] = {role.name: role for role in TeamRole}


def role_choices() -> str:
    """Human list of valid role names, e.g. "owner, admin, writer, or reader"."""
    names = [role.value for role in TEAM_ROLE_MAP.values()]
    return ", ".join(names[:-1]) + ", or " + names[-1]


def resolve_role(text: str) -> TeamRole:
    """Map role text to a TeamRole, ignoring case."""
    role = TEAM_ROLE_MAP.get(text.strip().upper())
    if role is None:
        raise InvalidRoleError(f"invalid team role, please use {role_choices()}")
    return role
