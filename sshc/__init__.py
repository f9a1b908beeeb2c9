"""
sshc - address book for SSH connections

Keeps label -> (username, hostname) records in a local JSON file and provides:
- Interactive add / remove / modify of saved connections
- Table listing of everything saved
- Type-to-filter host selection that launches the system ssh client
- Import of Host entries from ~/.ssh/config
"""

__version__ = "0.1.0"

# Export domain models
from .domain.connections import (
    ConnectionRecord,
    ConnectionChoice,
    ConnectionService,
    format_choices,
    render_table,
)

# Export infrastructure
from .infrastructure.state.file_store import JsonConnectionStore
from .infrastructure.launcher import SshLauncher

__all__ = [
    # Version
    "__version__",
    # Models
    "ConnectionRecord",
    "ConnectionChoice",
    # Services
    "ConnectionService",
    "format_choices",
    "render_table",
    # Infrastructure
    "JsonConnectionStore",
    "SshLauncher",
]
