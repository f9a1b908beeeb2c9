"""
Connection CLI commands
"""
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional

import typer
from rich.markup import escape

from ... import __version__
from ...core.constants import APP_NAME, EXIT_INTERRUPTED
from ...core.exceptions import SshcError
from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...core.utils import read_ssh_config, list_ssh_config_hosts, load_ssh_config
from ...domain.connections import (
    ConnectionRecord,
    ConnectionStore,
    format_choices,
    matches,
    render_table,
)
from .context import CliContext, get_context
from .prompts import InteractivePromptProvider

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()
prompt_provider = InteractivePromptProvider()


@contextmanager
def report_errors(action: str) -> Iterator[None]:
    """Turn domain errors and Ctrl-C into a message plus exit code"""
    try:
        yield
    except SshcError as e:
        stderr_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(e.exit_code)
    except (KeyboardInterrupt, EOFError):
        stderr_console.print("\nInterrupted")
        raise typer.Exit(EXIT_INTERRUPTED)
    except typer.Exit:
        raise
    except Exception as e:
        logger.exception("Failed to %s", action)
        stderr_console.print(f"[red]Error:[/red] Failed to {action}: {escape(str(e))}")
        raise typer.Exit(1)


def _success(message: str) -> None:
    stdout_console.print(f"[green]✓[/green] {escape(message)}")


def _show_table(store: ConnectionStore) -> None:
    typer.echo(render_table(store))


def _select_label(store: ConnectionStore, query: Optional[str], message: str) -> Optional[str]:
    """Ask for one saved label; None when nothing matches"""
    candidates = {key: record for key, record in store.items() if matches(key, query or "")}
    if not candidates:
        stdout_console.print("[yellow]⚠[/yellow] No saved connections match.")
        return None
    return prompt_provider.select(message, lambda text: format_choices(candidates, text))


# ============================================================
# Commands
# ============================================================

def add_run(
    ctx: typer.Context,
    label: Optional[str] = typer.Option(None, "--label", help="Connection label (prompted if omitted)"),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="SSH username (prompted if omitted)"),
    hostname: Optional[str] = typer.Option(None, "--hostname", "-H", help="Hostname or IP (prompted if omitted)"),
) -> None:
    """
    Add a connection; an existing label is replaced without asking.

    Examples:
        sshc add
        sshc add --label home -u bob -H 10.0.0.5
    """
    app_ctx = get_context(ctx)
    with report_errors("add connection"):
        if label is None:
            label = prompt_provider.prompt("Enter the label")
        if username is None:
            username = prompt_provider.prompt("Username")
        if hostname is None:
            hostname = prompt_provider.prompt("Hostname (IP address)")

        app_ctx.service.add(label, username, hostname)
        _success("The connection was added successfully.")
        _show_table(app_ctx.service.list_all())


def remove_run(
    ctx: typer.Context,
    query: Optional[str] = typer.Argument(None, help="Only offer labels containing this text"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """
    Remove a saved connection after confirmation.

    Examples:
        sshc remove
        sshc remove staging --yes
    """
    app_ctx = get_context(ctx)
    with report_errors("remove connection"):
        store = app_ctx.service.list_all()
        label = _select_label(store, query, "Select the connection you wish to remove:")
        if label is None:
            return

        confirmed = yes or prompt_provider.confirm(
            "Are you sure you want to remove this connection?", default=True
        )
        if not confirmed:
            logger.debug("Removal of %r declined", label)
            return

        app_ctx.service.remove(label)
        _success("The connection was removed successfully.")
        _show_table(app_ctx.service.list_all())


def modify_run(
    ctx: typer.Context,
    query: Optional[str] = typer.Argument(None, help="Only offer labels containing this text"),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="New username (prompted if omitted)"),
    hostname: Optional[str] = typer.Option(None, "--hostname", "-H", help="New hostname (prompted if omitted)"),
) -> None:
    """
    Change the username and hostname of a saved connection.

    Current values are offered as defaults, so pressing Enter keeps them.
    """
    app_ctx = get_context(ctx)
    with report_errors("modify connection"):
        store = app_ctx.service.list_all()
        label = _select_label(store, query, "Select the connection to modify:")
        if label is None:
            return

        current = store[label]
        if username is None:
            username = prompt_provider.prompt("New username", default=current.username)
        if hostname is None:
            hostname = prompt_provider.prompt("New hostname (IP address)", default=current.hostname)

        app_ctx.service.modify(label, username, hostname)
        _success("The connection was modified successfully.")


def list_run(ctx: typer.Context) -> None:
    """List all saved connections"""
    app_ctx = get_context(ctx)
    with report_errors("list connections"):
        _show_table(app_ctx.service.list_all())


def config_location_run(ctx: typer.Context) -> None:
    """Show where connections are stored"""
    app_ctx = get_context(ctx)
    typer.echo(f"Config file location: {app_ctx.store.path}")


def version_run() -> None:
    """Show the application version"""
    typer.echo(f"{APP_NAME} version {__version__}")


def connect_interactive(app_ctx: CliContext, query: Optional[str] = None) -> None:
    """Pick a saved connection and hand the terminal to ssh until it exits"""
    with report_errors("connect"):
        store = app_ctx.service.list_all()
        label = _select_label(store, query, "Choose the host connection you wish to SSH into:")
        if label is None:
            return

        record = store[label]
        typer.echo(f"Attempting to connect: ssh {record.target}")
        process = app_ctx.launcher.connect(record)
        app_ctx.launcher.wait(process)


def connect_run(
    ctx: typer.Context,
    query: Optional[str] = typer.Argument(None, help="Only offer labels containing this text"),
) -> None:
    """
    Choose a saved connection and open an SSH session to it.

    Running sshc with no command does the same.
    """
    connect_interactive(get_context(ctx), query)


def import_run(
    ctx: typer.Context,
    hosts: Optional[List[str]] = typer.Argument(None, help="Host aliases to import (default: all)"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Replace connections that already exist"),
) -> None:
    """
    Import Host entries from the OpenSSH client config.

    Wildcard patterns are ignored; the label is the Host alias.
    """
    app_ctx = get_context(ctx)
    with report_errors("import connections"):
        ssh_config = read_ssh_config(app_ctx.settings.ssh_config)
        available = list_ssh_config_hosts(ssh_config)

        selected = hosts or available
        for alias in selected:
            if alias not in available:
                stdout_console.print(f"[yellow]⚠[/yellow] Host '{escape(alias)}' not found in ssh config")
        selected = [alias for alias in selected if alias in available]
        if not selected:
            stdout_console.print(
                f"[yellow]⚠[/yellow] No host entries to import from {escape(str(app_ctx.settings.ssh_config))}"
            )
            return

        records: Dict[str, ConnectionRecord] = {}
        for alias in selected:
            entry = load_ssh_config(ssh_config, alias)
            records[alias] = ConnectionRecord(username=entry["user"], hostname=entry["host"])

        added, skipped = app_ctx.service.add_many(records, overwrite=overwrite)
        if skipped:
            logger.info("Skipped existing connection(s): %s", ", ".join(skipped))
            stdout_console.print(
                f"[yellow]⚠[/yellow] Skipped {len(skipped)} existing connection(s); "
                "use --overwrite to replace them"
            )
        _success(f"Imported {len(added)} connection(s).")
        _show_table(app_ctx.service.list_all())


def help_run(
    verb: Optional[str] = typer.Argument(None, help="Command to describe"),
) -> None:
    """Describe one command, or list them all"""
    name = resolve_verb(verb) if verb else None
    if name is not None:
        typer.echo(COMMANDS[name].help)
        return

    typer.echo("Available commands:")
    for name, command in COMMANDS.items():
        aliases = f" ({', '.join(command.aliases)})" if command.aliases else ""
        typer.echo(f"  {name}{aliases}: {command.help}")


# ============================================================
# Command Table
# ============================================================

@dataclass(frozen=True)
class CommandSpec:
    """A CLI verb and the handler it dispatches to"""
    name: str
    handler: Callable[..., None]
    help: str
    aliases: List[str] = field(default_factory=list)


COMMANDS: Dict[str, CommandSpec] = {
    command.name: command
    for command in (
        CommandSpec("add", add_run, "Adds a new SSH connection entry."),
        CommandSpec("remove", remove_run, "Removes an existing SSH connection entry."),
        CommandSpec("modify", modify_run, "Modifies an existing SSH connection entry."),
        CommandSpec("list", list_run, "Lists all SSH connections."),
        CommandSpec("config-location", config_location_run, "Displays the location of the config file."),
        CommandSpec("version", version_run, "Displays the version of the application.", ["-v"]),
        CommandSpec("connect", connect_run, "Connects to a saved host (default when no command is given)."),
        CommandSpec("import", import_run, "Imports Host entries from ~/.ssh/config."),
        CommandSpec("help", help_run, "Displays help for all commands or a single one.", ["-h"]),
    )
}

ALIASES: Dict[str, str] = {
    alias: command.name for command in COMMANDS.values() for alias in command.aliases
}


def resolve_verb(token: str) -> Optional[str]:
    """
    Map a CLI token to a command name.

    Aliases win first; otherwise leading dashes are stripped so ``--add``
    and ``add`` are the same command.
    """
    if token in ALIASES:
        return ALIASES[token]
    name = token.lstrip("-")
    return name if name in COMMANDS else None


def register_commands(app: typer.Typer) -> None:
    """Register every verb in the command table on the app"""
    for command in COMMANDS.values():
        app.command(name=command.name)(command.handler)
