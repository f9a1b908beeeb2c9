"""
Per-invocation CLI context
"""
from dataclasses import dataclass

import typer

from ...core.settings import Settings
from ...domain.connections.service import ConnectionService
from ...infrastructure.launcher import SshLauncher
from ...infrastructure.state.file_store import JsonConnectionStore


@dataclass
class CliContext:
    """Settings plus the collaborators built from them, shared via ctx.obj"""
    settings: Settings
    store: JsonConnectionStore
    service: ConnectionService
    launcher: SshLauncher
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "CliContext":
        store = JsonConnectionStore(settings.data_file)
        return cls(
            settings=settings,
            store=store,
            service=ConnectionService(store),
            launcher=SshLauncher(settings.ssh_binary),
        )


def get_context(ctx: typer.Context) -> CliContext:
    """Context object installed by the main callback"""
    return ctx.find_object(CliContext)
