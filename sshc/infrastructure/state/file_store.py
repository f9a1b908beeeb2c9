"""
File-based connection store implementation
"""
import json
from pathlib import Path
from typing import Any, Dict

from ...core.interfaces import ConnectionRepository
from ...core.exceptions import StoreIOError, StoreParseError
from ...core.logging import get_logger
from ...domain.connections.models import ConnectionRecord, ConnectionStore

logger = get_logger(__name__)

EMPTY_DOCUMENT = "{}"


class JsonConnectionStore(ConnectionRepository):
    """
    JSON document storage for saved connections.
    
    The whole document is read into memory on ``load`` and rewritten on
    ``save``; there is no locking, so concurrent writers race and the last
    one wins. Layout::
    
        {
          "<label>": {"username": "...", "hostname": "..."}
        }
    """
    
    def __init__(self, path: Path):
        """
        Initialize file store.
        
        Args:
            path: Location of the JSON document
        """
        self._path = Path(path).expanduser().absolute()
    
    @property
    def path(self) -> Path:
        return self._path
    
    def _ensure_directory(self) -> None:
        """Create the containing directory if missing"""
        directory = self._path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOError(f"Error creating directory at [{directory}]: {e}") from e
    
    def _ensure_file(self) -> None:
        """Create the document as an empty object if missing"""
        if self._path.exists():
            return
        try:
            self._path.write_text(EMPTY_DOCUMENT, encoding='utf-8')
        except OSError as e:
            raise StoreIOError(f"Error creating file at [{self._path}]: {e}") from e
        logger.debug("Created empty connection store at %s", self._path)
    
    def load(self) -> ConnectionStore:
        """
        Load every saved connection.
        
        Raises:
            StoreIOError: If the directory/file can't be created or read
            StoreParseError: If the document isn't a JSON object of objects
        """
        self._ensure_directory()
        self._ensure_file()
        
        try:
            raw = self._path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise StoreParseError(f"[{self._path}] is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StoreIOError(
                f"An error was encountered while reading the file at [{self._path}]: {e}"
            ) from e
        
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreParseError(f"Invalid JSON in [{self._path}]: {e}") from e
        
        return self._parse(data)
    
    def _parse(self, data: Any) -> ConnectionStore:
        if not isinstance(data, dict):
            raise StoreParseError(
                f"Expected a JSON object at the top level of [{self._path}], "
                f"got {type(data).__name__}"
            )
        
        store: ConnectionStore = {}
        for label, entry in data.items():
            if not isinstance(entry, dict):
                raise StoreParseError(
                    f"Entry '{label}' in [{self._path}] is not an object"
                )
            for field_name in ("username", "hostname"):
                value = entry.get(field_name, "")
                if not isinstance(value, str):
                    raise StoreParseError(
                        f"Field '{field_name}' of entry '{label}' in [{self._path}] "
                        f"must be a string, got {type(value).__name__}"
                    )
            store[label] = ConnectionRecord.from_dict(entry)
        
        logger.debug("Loaded %d connection(s) from %s", len(store), self._path)
        return store
    
    def save(self, store: ConnectionStore) -> None:
        """
        Overwrite the document with the whole mapping.
        
        Raises:
            StoreIOError: If the file can't be written
        """
        self._ensure_directory()
        document: Dict[str, Dict[str, str]] = {
            label: record.to_dict() for label, record in store.items()
        }
        
        try:
            self._path.write_text(
                json.dumps(document, indent=2, ensure_ascii=False),
                encoding='utf-8',
            )
        except OSError as e:
            raise StoreIOError(f"An error occurred during file writing [{self._path}]: {e}") from e
        
        logger.debug("Saved %d connection(s) to %s", len(document), self._path)
