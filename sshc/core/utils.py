"""
Core utility functions
"""
import getpass
import paramiko
from pathlib import Path
from typing import Dict, Any, List

from .exceptions import ConfigError

# Characters that make a Host line a pattern rather than a concrete alias
_PATTERN_CHARS = set("*?!")


# ============================================================
# SSH Config Management
# ============================================================

def read_ssh_config(config_path: Path) -> paramiko.SSHConfig:
    """
    Parse an OpenSSH client configuration file.
    
    Raises:
        ConfigError: If the file doesn't exist or can't be parsed
    """
    config_path = Path(config_path).expanduser()
    if not config_path.exists():
        raise ConfigError(f"{config_path} does not exist")
    
    try:
        return paramiko.SSHConfig.from_path(str(config_path))
    except Exception as e:
        raise ConfigError(f"Failed to parse {config_path}: {e}") from e


def list_ssh_config_hosts(ssh_config: paramiko.SSHConfig) -> List[str]:
    """Concrete Host aliases (no wildcard or negated patterns), sorted"""
    return sorted(
        name for name in ssh_config.get_hostnames()
        if not _PATTERN_CHARS.intersection(name)
    )


def load_ssh_config(ssh_config: paramiko.SSHConfig, alias: str) -> Dict[str, Any]:
    """
    Look up the effective settings for one Host alias.
    
    Args:
        ssh_config: Parsed SSH configuration
        alias: Host name in SSH configuration
    
    Returns:
        Dictionary containing host and user; user falls back to the local login
    """
    entry = ssh_config.lookup(alias)
    
    return {
        "host": entry.get("hostname", alias),
        "user": entry.get("user") or getpass.getuser(),
    }
