"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.connections.models import ConnectionRecord, ConnectionChoice


class ConnectionRepository(ABC):
    """Connection store persistence interface"""
    
    @property
    @abstractmethod
    def path(self) -> Path:
        """Location of the backing document"""
        pass
    
    @abstractmethod
    def load(self) -> Dict[str, "ConnectionRecord"]:
        """Load the whole label -> record mapping"""
        pass
    
    @abstractmethod
    def save(self, store: Dict[str, "ConnectionRecord"]) -> None:
        """Overwrite the backing document with the whole mapping"""
        pass


class PromptProvider(ABC):
    """User prompt interface"""
    
    @abstractmethod
    def prompt(self, message: str, default: Optional[str] = None) -> str:
        """Prompt user for free-text input"""
        pass
    
    @abstractmethod
    def confirm(self, message: str, default: bool = False) -> bool:
        """Prompt user for confirmation"""
        pass
    
    @abstractmethod
    def select(self, message: str, source: Callable[[str], Sequence["ConnectionChoice"]]) -> str:
        """
        Let the user pick one choice, returning its key.
        
        ``source`` maps the text typed so far to the choices to offer and is
        called again on every keystroke.
        """
        pass
