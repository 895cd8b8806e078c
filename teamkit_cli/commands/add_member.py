"""teamkit add-member — add a user to a team, then send them a welcome message.

The membership change is authoritative: any error aborts the command.
The welcome message is best-effort: its failure is reported in the output
but the command still succeeds.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

from rich.console import Console

from teamkit_cli.core.errors import ArgumentError
from teamkit_cli.core.identity import identity_for
from teamkit_cli.core.models import AddMemberArgs, AddMemberRequest, OperationOutcome
from teamkit_cli.core.notifier import send_welcome
from teamkit_cli.core.roles import resolve_role
from teamkit_cli.core.settings import Settings
from teamkit_sdk import ChatClient, TeamsClient

logger = logging.getLogger(__name__)


def parse_args(
    args: Optional[List[str]],
    user: Optional[str],
    email: Optional[str],
    role: Optional[str],
) -> AddMemberArgs:
    """Check raw command input. Makes no network calls."""
    if not args or len(args) != 1:
        raise ArgumentError("add-member requires team name argument")
    if email:
        raise ArgumentError("add-member via email address not yet supported")
    if not user:
        raise ArgumentError("username required via --user flag")
    if not role:
        raise ArgumentError("team role required via --role flag")
    return AddMemberArgs(team=args[0], username=user, role_text=role)


def build_request(args: AddMemberArgs) -> AddMemberRequest:
    return AddMemberRequest(
        team=args.team,
        username=args.username,
        role=resolve_role(args.role_text),
    )


def add_member(request: AddMemberRequest, teams: TeamsClient, chat: ChatClient, identity) -> OperationOutcome:
    """Add the member, then attempt the welcome message.

    Errors from the team service propagate and no message is sent.
    """
    teams.add_member(request.team, request.username, request.role.value)
    logger.info("Added %s to %s as %s", request.username, request.team, request.role.value)

    notification = send_welcome(request, chat, identity)
    return OperationOutcome(request=request, notification=notification)


def report(outcome: OperationOutcome, json_output: bool = False, console: Optional[Console] = None) -> None:
    out = console or Console()
    if json_output:
        out.print_json(json.dumps(outcome.to_dict()))
    else:
        out.print(outcome.message, markup=False, highlight=False, soft_wrap=True)


def run(
    args: Optional[List[str]],
    user: Optional[str],
    email: Optional[str],
    role: Optional[str],
    settings: Settings,
    json_output: bool = False,
) -> OperationOutcome:
    """Validate, add the member, notify, and print the outcome."""
    request = build_request(parse_args(args, user, email, role))

    with TeamsClient(base_url=settings.server, api_key=settings.api_key, timeout=settings.timeout_s) as teams, \
            ChatClient(base_url=settings.chat_server, api_key=settings.api_key, timeout=settings.timeout_s) as chat:
        outcome = add_member(request, teams, chat, identity_for(settings.username, teams))

    report(outcome, json_output=json_output)
    return outcome
