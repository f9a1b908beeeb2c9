"""
Main CLI application
"""
import sys
from pathlib import Path
from typing import Optional, Sequence

import typer
from rich.markup import escape

from ...core.exceptions import ConfigError
from ...core.logging import setup_logging, get_logger, get_stderr_console
from ..config.loader import ConfigLoader
from .commands import register_commands, connect_interactive
from .context import CliContext
from .routing import normalize_args

logger = get_logger(__name__)
stderr_console = get_stderr_console()

app = typer.Typer(
    name="sshc",
    add_completion=False,
    help="Address book for SSH connections",
    rich_markup_mode="rich",
)

register_commands(app)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Log file path",
    ),
    data_file: Optional[Path] = typer.Option(
        None,
        "--data-file",
        help="Connection store location (default: ~/.sshc/data/ssh.json)",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Settings file (TOML, default: ~/.sshc/config.toml if present)",
    ),
):
    """
    sshc - Address book for SSH connections
    
    Run without a command to pick a saved host and connect to it.
    """
    cli_overrides = {
        "log_level": log_level,
        "log_file": log_file,
        "data_file": data_file,
    }
    try:
        settings = ConfigLoader().load_settings(toml_path=config_file, cli_overrides=cli_overrides)
    except ConfigError as e:
        stderr_console.print(f"[red]Config Error:[/red] {escape(str(e))}")
        raise typer.Exit(e.exit_code)
    
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    logger.debug("Settings: %s", settings.to_dict())
    
    ctx.obj = CliContext.from_settings(settings)
    
    if ctx.invoked_subcommand is None:
        connect_interactive(ctx.obj)


def run(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point"""
    args = normalize_args(sys.argv[1:] if argv is None else argv)
    app(args=args, prog_name="sshc")


if __name__ == "__main__":
    run()
