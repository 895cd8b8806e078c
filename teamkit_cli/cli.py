"""teamkit CLI — Typer app with all subcommands."""

from __future__ import annotations

import traceback
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from teamkit_cli import __version__
from teamkit_cli.core.logging import setup_logging
from teamkit_cli.core.settings import Settings

console = Console(stderr=True)

app = typer.Typer(
    name="teamkit",
    help=(
        "teamkit — manage team membership.\n\n"
        "Exit codes: 0=success (even if the welcome message failed), 1=error."
    ),
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    epilog=(
        "Examples:\n"
        "  teamkit add-member eng --user alice --role writer\n"
        "  teamkit whoami\n\n"
        f"teamkit v{__version__}"
    ),
)


def _version_callback(value: bool) -> None:
    if value:
        Console().print(f"teamkit v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit.",
        callback=_version_callback, is_eager=True,
    ),
) -> None:
    """Manage team membership."""
    pass


# ── add-member ───────────────────────────────────────────────────

@app.command(name="add-member")
def add_member_cmd(
    team: Optional[List[str]] = typer.Argument(
        None, help="Team name.", metavar="TEAM", show_default=False,
    ),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Username to add."),
    email: Optional[str] = typer.Option(None, "--email", "-e", help="Email address to invite (not yet supported)."),
    role: Optional[str] = typer.Option(None, "--role", "-r", help="Team role: owner, admin, writer, reader."),
    server: Optional[str] = typer.Option(
        None, "--server", "-s", help="Team service URL.", envvar="TEAMKIT_SERVER",
    ),
    chat_server: Optional[str] = typer.Option(
        None, "--chat-server", help="Chat service URL (defaults to --server).", envvar="TEAMKIT_CHAT_SERVER",
    ),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", "-k", help="API key.", envvar="TEAMKIT_API_KEY",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON."),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs and tracebacks."),
) -> None:
    """Add a user to a team and send them a welcome chat message.

    Example:
      teamkit add-member eng --user alice --role writer
    """
    _run_safe(
        lambda: _add_member_impl(team, user, email, role, server, chat_server, api_key, json_output, verbose),
        verbose=verbose,
    )


def _add_member_impl(
    team: Optional[List[str]], user: Optional[str], email: Optional[str], role: Optional[str],
    server: Optional[str], chat_server: Optional[str], api_key: Optional[str],
    json_output: bool, verbose: bool,
) -> None:
    from teamkit_cli.commands.add_member import run

    settings = Settings.load(server=server, chat_server=chat_server, api_key=api_key)
    setup_logging(verbose, settings.log_level)
    run(team, user, email, role, settings, json_output=json_output)


# ── whoami ───────────────────────────────────────────────────────

@app.command(name="whoami")
def whoami_cmd(
    server: Optional[str] = typer.Option(
        None, "--server", "-s", help="Team service URL.", envvar="TEAMKIT_SERVER",
    ),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", "-k", help="API key.", envvar="TEAMKIT_API_KEY",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output raw JSON."),
) -> None:
    """Show the acting username used to address welcome messages."""
    _run_safe(lambda: _whoami_impl(server, api_key, json_output))


def _whoami_impl(server: Optional[str], api_key: Optional[str], json_output: bool) -> None:
    import json as json_mod
    from teamkit_cli.core.identity import identity_for
    from teamkit_sdk import TeamsClient

    settings = Settings.load(server=server, api_key=api_key)
    setup_logging(False, settings.log_level)
    with TeamsClient(base_url=settings.server, api_key=settings.api_key, timeout=settings.timeout_s) as client:
        username = identity_for(settings.username, client).username()
    source = "config" if settings.username else "server"
    out = Console()
    if json_output:
        out.print_json(json_mod.dumps({"username": username, "source": source}))
    else:
        out.print(f"[bold]Username:[/bold] {escape(username)} [dim]({source})[/dim]")


# ── config ───────────────────────────────────────────────────────

@app.command(name="config")
def config_cmd() -> None:
    """Show the effective configuration (API key masked)."""
    _run_safe(_config_impl)


def _config_impl() -> None:
    from rich.table import Table

    table = Table(show_header=False, border_style="blue", title="teamkit", title_style="bold")
    table.add_column("Key", style="dim")
    table.add_column("Value")
    for key, value in Settings.load().to_dict().items():
        table.add_row(key, str(value))
    Console().print(table)


# ── Error handling ───────────────────────────────────────────────

EXIT_ERROR = 1


def _run_safe(fn, verbose: bool = False) -> None:
    """Run a function with clean error handling."""
    try:
        fn()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise SystemExit(130)
    except Exception as e:
        console.print(f"[red bold]Error:[/red bold] {escape(str(e))}", soft_wrap=True)
        if verbose:
            console.print(traceback.format_exc(), markup=False, highlight=False)
        raise SystemExit(EXIT_ERROR)
