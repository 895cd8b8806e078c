"""teamkit CLI error hierarchy.

Remote failures are ``teamkit_sdk.errors.ApiError``; these cover everything
detected locally, before any network call.
"""


class TeamkitError(Exception):
    """Base error for all local teamkit failures."""


class ArgumentError(TeamkitError):
    """Missing, extra, or unsupported command arguments."""


class InvalidRoleError(ArgumentError):
    """Role text is not one of the known team roles."""


class ConfigError(TeamkitError):
    """Unreadable or invalid configuration."""
