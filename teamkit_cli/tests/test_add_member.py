"""Tests for add-member validation and orchestration."""

from __future__ import annotations

from typing import List

import httpx
import pytest

from fakes import FakeChat, FakeTeams
from teamkit_cli.commands.add_member import add_member, build_request, parse_args
from teamkit_cli.core.errors import ArgumentError, InvalidRoleError
from teamkit_cli.core.identity import ServiceIdentity, StaticIdentity
from teamkit_cli.core.models import AddMemberArgs, AddMemberRequest
from teamkit_cli.core.roles import TeamRole
from teamkit_sdk.errors import ForbiddenError, NotFoundError


class TestParseArgs:
    def test_valid(self):
        args = parse_args(["eng"], "alice", None, "writer")
        assert args == AddMemberArgs(team="eng", username="alice", role_text="writer")

    @pytest.mark.parametrize("positional", [None, [], ["eng", "ops"]])
    def test_requires_exactly_one_team(self, positional):
        with pytest.raises(ArgumentError, match="requires team name argument"):
            parse_args(positional, "alice", None, "writer")

    def test_email_not_supported(self):
        with pytest.raises(ArgumentError, match="not yet supported"):
            parse_args(["eng"], "alice", "a@b.com", "writer")

    def test_email_rejected_even_without_user_or_role(self):
        with pytest.raises(ArgumentError, match="not yet supported"):
            parse_args(["eng"], None, "a@b.com", None)

    @pytest.mark.parametrize("user", [None, ""])
    def test_username_required(self, user):
        with pytest.raises(ArgumentError, match="username required"):
            parse_args(["eng"], user, None, "writer")

    @pytest.mark.parametrize("role", [None, ""])
    def test_role_required(self, role):
        with pytest.raises(ArgumentError, match="team role required"):
            parse_args(["eng"], "alice", None, role)

    def test_role_text_not_resolved_yet(self):
        args = parse_args(["eng"], "alice", None, "bogus")
        assert args.role_text == "bogus"


class TestBuildRequest:
    def test_resolves_role(self):
        request = build_request(AddMemberArgs("eng", "alice", "ADMIN"))
        assert request == AddMemberRequest(team="eng", username="alice", role=TeamRole.ADMIN)

    def test_invalid_role(self):
        with pytest.raises(InvalidRoleError, match="owner, admin, writer, or reader"):
            build_request(AddMemberArgs("eng", "alice", "bogus"))


def _request(role=TeamRole.WRITER) -> AddMemberRequest:
    return AddMemberRequest(team="eng", username="alice", role=role)


class TestAddMember:
    def test_member_added_and_notified(self):
        teams, chat = FakeTeams(), FakeChat()

        outcome = add_member(_request(), teams, chat, StaticIdentity("bob"))

        assert teams.calls == [("eng", "alice", "writer")]
        assert len(chat.calls) == 1
        assert outcome.notification.sent is True
        assert "alice" in outcome.message
        assert "error" not in outcome.message

    def test_notification_follows_mutation(self):
        events: List[str] = []
        teams, chat = FakeTeams(), FakeChat()
        teams.events = chat.events = events

        add_member(_request(), teams, chat, StaticIdentity("bob"))

        assert events == ["add_member", "send_message"]

    def test_notification_failure_is_soft(self):
        teams, chat = FakeTeams(), FakeChat(error_message="rate limited")

        outcome = add_member(_request(TeamRole.ADMIN), teams, chat, StaticIdentity("bob"))

        assert outcome.notification.sent is False
        assert "alice" in outcome.message
        assert "eng" in outcome.message
        assert "rate limited" in outcome.message

    def test_unreachable_chat_is_soft(self):
        teams = FakeTeams()
        chat = FakeChat(raises=httpx.ConnectError("connection refused"))

        outcome = add_member(_request(), teams, chat, StaticIdentity("bob"))

        assert outcome.notification.sent is False
        assert teams.calls == [("eng", "alice", "writer")]

    def test_mutation_failure_skips_notification(self):
        teams = FakeTeams(error=NotFoundError(404, "team not found"))
        chat = FakeChat()

        with pytest.raises(NotFoundError, match="team not found"):
            add_member(_request(TeamRole.ADMIN), teams, chat, StaticIdentity("bob"))

        assert chat.calls == []

    def test_mutation_transport_failure_is_hard(self):
        teams = FakeTeams(error=httpx.ConnectError("connection refused"))
        chat = FakeChat()

        with pytest.raises(httpx.ConnectError):
            add_member(_request(), teams, chat, StaticIdentity("bob"))

        assert chat.calls == []

    def test_identity_from_service(self):
        teams, chat = FakeTeams(whoami_username="carol"), FakeChat()

        add_member(_request(), teams, chat, ServiceIdentity(teams))

        assert chat.calls[0][0] == "alice,carol"

    def test_forbidden_message_propagates_verbatim(self):
        teams = FakeTeams(error=ForbiddenError(403, "permission denied"))
        with pytest.raises(ForbiddenError) as exc_info:
            add_member(_request(), teams, FakeChat(), StaticIdentity("bob"))
        assert str(exc_info.value) == "permission denied"


class TestOutcome:
    def test_to_dict(self):
        outcome = add_member(_request(), FakeTeams(), FakeChat(error_message="nope"), StaticIdentity("bob"))
        data = outcome.to_dict()
        assert data["team"] == "eng"
        assert data["username"] == "alice"
        assert data["role"] == "writer"
        assert data["notified"] is False
        assert data["notification_error"] == "nope"
        assert data["message"] == outcome.message
