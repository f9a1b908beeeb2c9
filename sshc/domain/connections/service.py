"""
Connection domain service - business logic
"""
from typing import Dict, List, Tuple

from ...core.interfaces import ConnectionRepository
from ...core.exceptions import ConnectionNotFoundError
from ...core.logging import get_logger
from .models import ConnectionRecord, ConnectionStore

logger = get_logger(__name__)


class ConnectionService:
    """
    Connection service - pure business logic.
    
    Every mutation is a full load -> mutate -> save cycle against the
    repository. No direct dependency on CLI, Typer, or file system.
    """
    
    def __init__(self, repository: ConnectionRepository):
        self.repository = repository
    
    def list_all(self) -> ConnectionStore:
        """Load every saved connection"""
        return self.repository.load()
    
    def add(self, label: str, username: str, hostname: str) -> Tuple[ConnectionRecord, bool]:
        """
        Save a connection, silently replacing any existing one with that label.
        
        Returns:
            (record, replaced) tuple
        """
        store = self.repository.load()
        replaced = label in store
        record = ConnectionRecord(username=username, hostname=hostname)
        store[label] = record
        self.repository.save(store)
        logger.debug("Saved connection %r (replaced=%s)", label, replaced)
        return record, replaced
    
    def add_many(self, records: Dict[str, ConnectionRecord], overwrite: bool = False) -> Tuple[List[str], List[str]]:
        """
        Save several connections in a single load/save cycle.
        
        Args:
            records: Label -> record mapping to merge in
            overwrite: Replace labels that already exist instead of skipping them
        
        Returns:
            (added, skipped) label lists
        """
        store = self.repository.load()
        added: List[str] = []
        skipped: List[str] = []
        for label, record in records.items():
            if label in store and not overwrite:
                skipped.append(label)
                continue
            store[label] = record
            added.append(label)
        
        if added:
            self.repository.save(store)
        logger.debug("Merged %d connection(s), skipped %d", len(added), len(skipped))
        return added, skipped
    
    def remove(self, label: str) -> ConnectionRecord:
        """
        Delete a connection.
        
        Raises:
            ConnectionNotFoundError: If no connection is saved under label
        """
        store = self.repository.load()
        record = self._require(store, label)
        del store[label]
        self.repository.save(store)
        logger.debug("Removed connection %r", label)
        return record
    
    def modify(self, label: str, username: str, hostname: str) -> ConnectionRecord:
        """
        Replace an existing connection wholesale.
        
        Raises:
            ConnectionNotFoundError: If no connection is saved under label
        """
        store = self.repository.load()
        self._require(store, label)
        record = ConnectionRecord(username=username, hostname=hostname)
        store[label] = record
        self.repository.save(store)
        logger.debug("Modified connection %r", label)
        return record
    
    @staticmethod
    def _require(store: ConnectionStore, label: str) -> ConnectionRecord:
        if label not in store:
            raise ConnectionNotFoundError(f"No connection saved under label '{label}'")
        return store[label]
