"""
Runtime settings resolved once at startup
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_DATA_FILE, DEFAULT_SSH_BINARY, SSH_CONFIG_PATH


def _resolve_path(value: Any) -> Path:
    return Path(value).expanduser().absolute()


@dataclass
class Settings:
    """Application settings"""
    data_file: Path
    ssh_binary: str = DEFAULT_SSH_BINARY
    ssh_config: Path = Path(SSH_CONFIG_PATH)
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create from a merged configuration dictionary"""
        log_file = data.get("log_file")
        return cls(
            data_file=_resolve_path(data.get("data_file") or DEFAULT_DATA_FILE),
            ssh_binary=str(data.get("ssh_binary") or DEFAULT_SSH_BINARY),
            ssh_config=_resolve_path(data.get("ssh_config") or SSH_CONFIG_PATH),
            log_level=str(data.get("log_level") or "INFO"),
            log_file=_resolve_path(log_file) if log_file else None,
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "data_file": str(self.data_file),
            "ssh_binary": self.ssh_binary,
            "ssh_config": str(self.ssh_config),
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None,
        }
