"""
Connection domain models
"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ConnectionRecord:
    """One saved SSH target"""
    username: str
    hostname: str
    
    @property
    def target(self) -> str:
        """Destination argument handed to the ssh client"""
        return f"{self.username}@{self.hostname}"
    
    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary"""
        return {
            "username": self.username,
            "hostname": self.hostname,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConnectionRecord":
        """Create from dictionary; absent fields become empty strings"""
        return cls(
            username=data.get("username", ""),
            hostname=data.get("hostname", ""),
        )


# Insertion order is display order
ConnectionStore = Dict[str, ConnectionRecord]


@dataclass(frozen=True)
class ConnectionChoice:
    """One entry of an interactive selection list"""
    display_label: str
    key: str
