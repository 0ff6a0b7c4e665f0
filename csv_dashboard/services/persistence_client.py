# csv_dashboard/services/persistence_client.py

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from csv_dashboard import config
from csv_dashboard.models.csv_models import Row, StoredFile

logger = logging.getLogger(__name__)

LIST_PATH = "/api/get_csv_files"
UPLOAD_PATH = "/api/upload_csv"


class PersistenceError(Exception):
    pass


class PersistenceClient:
    """
    Talks to the storage API over JSON/HTTP.

    Failures are logged and reported as None; callers keep whatever
    they already had. There is no retry and no local bookkeeping: a file
    only shows up after a successful upload followed by a fresh list.
    """

    def __init__(self, base_url: str = config.BACKEND_URL, http: Optional[httpx.Client] = None):
        self.base_url = base_url.rstrip("/")
        self.http = http or httpx.Client()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def fetch_list(self) -> Optional[List[StoredFile]]:
        try:
            resp = self.http.get(self._url(LIST_PATH))
            payload = resp.json()
            files = [StoredFile.model_validate(item) for item in payload]
        except (httpx.HTTPError, ValueError, TypeError, ValidationError) as e:
            logger.error("Error fetching uploaded files: %s", e)
            return None

        logger.info("Refreshed file list: %d files", len(files))
        return files

    def _post_upload(self, file_name: str, rows: List[Row]) -> Dict[str, Any]:
        body = StoredFile(file_name=file_name, data=rows).to_payload()
        resp = self.http.post(self._url(UPLOAD_PATH), json=body)
        if not resp.is_success:
            raise PersistenceError(f"Server error: {resp.status_code} - {resp.text}")
        return resp.json()

    def upload(self, file_name: str, rows: List[Row]) -> Optional[List[StoredFile]]:
        """
        Save parsed rows under file_name, then re-list the stored files.
        Returns the refreshed list, or None when the upload or the refresh failed.
        """
        logger.debug("Preparing to upload file %s (%d rows)", file_name, len(rows))
        try:
            result = self._post_upload(file_name, rows)
        except (PersistenceError, httpx.HTTPError, ValueError) as e:
            logger.error("Error uploading file: %s", e)
            return None

        logger.info("File uploaded successfully: %s", result)
        return self.fetch_list()

    def close(self) -> None:
        self.http.close()
