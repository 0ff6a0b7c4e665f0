# csv_dashboard/utils/data_store.py

import json
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

from csv_dashboard import config
from csv_dashboard.models.csv_models import StoredFile

logger = logging.getLogger(__name__)


class CsvFileStore:
    """
    Uploaded CSV files keyed by file name.

    Saving a name that already exists replaces its rows (last write wins)
    and keeps its position in the listing. With a path, the whole store is
    mirrored to a JSON file after every save and reloaded on start.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else None
        self._files: Dict[str, StoredFile] = {}
        self._lock = threading.Lock()
        if self.path is not None:
            self._load()

    def _load(self) -> None:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError:
            logger.info("No CSV store at %s yet, starting empty", self.path)
            return

        for item in payload:
            record = StoredFile.model_validate(item)
            self._files[record.file_name] = record
        logger.info("Loaded %d stored CSV files from %s", len(self._files), self.path)

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([record.to_payload() for record in self._files.values()], f)

    def save(self, record: StoredFile) -> None:
        with self._lock:
            replaced = record.file_name in self._files
            self._files[record.file_name] = record
            if self.path is not None:
                self._flush()
        logger.info(
            "%s %s (%d rows)",
            "Replaced" if replaced else "Stored",
            record.file_name,
            len(record.data),
        )

    def list_files(self) -> List[StoredFile]:
        with self._lock:
            return list(self._files.values())

    def get(self, file_name: str) -> Optional[StoredFile]:
        with self._lock:
            return self._files.get(file_name)


_STORE: Optional[CsvFileStore] = None
_STORE_LOCK = threading.Lock()


def get_store() -> CsvFileStore:
    """
    Process-wide store used by the API routers (FastAPI dependency).
    """
    global _STORE
    with _STORE_LOCK:
        if _STORE is None:
            _STORE = CsvFileStore(config.CSV_STORE_PATH)
    return _STORE
