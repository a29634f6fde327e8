import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from pydantic import ValidationError

from config import logger, HISTORY_CONFIG
from exceptions import PersistenceException
from models import ScanHistoryEntry, HistoryList


class LocalStorage:
    """String key/value store backed by one JSON file per key in a directory."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceException(key, f"read failed: {e}")

    def set_item(self, key: str, value: str) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(value)
                os.replace(tmp_path, self._path(key))
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceException(key, f"write failed: {e}")

    def remove_item(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceException(key, f"remove failed: {e}")


class HistoryStore:
    """Persists the scan history list under a single storage key, always as a whole."""

    def __init__(self, storage: LocalStorage, key: str = HISTORY_CONFIG.STORAGE_KEY, limit: int = HISTORY_CONFIG.LIMIT):
        self.storage = storage
        self.key = key
        self.limit = limit

    def load(self) -> List[ScanHistoryEntry]:
        raw = self.storage.get_item(self.key)
        if raw is None:
            return []
        try:
            entries = HistoryList.validate_json(raw)
        except ValidationError as e:
            raise PersistenceException(self.key, f"malformed history ({e.error_count()} errors)")
        return entries[:self.limit]

    def save(self, entries: List[ScanHistoryEntry]) -> None:
        self.storage.set_item(self.key, HistoryList.dump_json(entries).decode("utf-8"))
        logger.debug("Persisted %d history entries under %s", len(entries), self.key)

    def clear(self) -> None:
        self.storage.remove_item(self.key)
