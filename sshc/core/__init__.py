"""
Core infrastructure layer
"""
from .constants import *
from .exceptions import *
from .logging import setup_logging, get_logger, get_stdout_console, get_stderr_console
from .interfaces import ConnectionRepository, PromptProvider
from .settings import Settings
from .utils import read_ssh_config, list_ssh_config_hosts, load_ssh_config

__all__ = [
    "setup_logging",
    "get_logger",
    "get_stdout_console",
    "get_stderr_console",
    "ConnectionRepository",
    "PromptProvider",
    "Settings",
    "read_ssh_config",
    "list_ssh_config_hosts",
    "load_ssh_config",
    "SshcError",
    "ConfigError",
    "StoreError",
    "StoreIOError",
    "StoreParseError",
    "ConnectionNotFoundError",
    "LaunchError",
]
