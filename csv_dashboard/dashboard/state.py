# csv_dashboard/dashboard/state.py

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, List, Optional, Union

from csv_dashboard.models.csv_models import Row, StoredFile
from csv_dashboard.services.visuals_engine import process_rows


@dataclass(frozen=True)
class DashboardState:
    """
    Everything the page shows, kept in a memory-only dcc.Store.
    Transitions return a new state and never mutate the old one.
    """

    labels: List[str] = field(default_factory=list)
    values: List[Union[int, float]] = field(default_factory=list)
    table_rows: List[Row] = field(default_factory=list)
    uploaded_files: List[Dict[str, Any]] = field(default_factory=list)
    selected_file: str = ""

    @classmethod
    def from_store(cls, data: Optional[Dict[str, Any]]) -> "DashboardState":
        if not data:
            return cls()
        return cls(**{key: data[key] for key in cls.__dataclass_fields__ if key in data})

    def to_store(self) -> Dict[str, Any]:
        return asdict(self)

    def file_names(self) -> List[str]:
        return [record["fileName"] for record in self.uploaded_files]

    def find_file(self, file_name: str) -> Optional[Dict[str, Any]]:
        for record in self.uploaded_files:
            if record.get("fileName") == file_name:
                return record
        return None

    def with_rows(self, rows: List[Row]) -> "DashboardState":
        series, table_rows = process_rows(rows)
        return replace(
            self,
            labels=list(series.labels),
            values=list(series.values),
            table_rows=list(table_rows),
        )

    def with_files(self, files: Optional[List[StoredFile]]) -> "DashboardState":
        # None means the fetch failed; keep the list we already have
        if files is None:
            return self
        return replace(self, uploaded_files=[record.to_payload() for record in files])

    def with_selection(self, file_name: str) -> "DashboardState":
        state = replace(self, selected_file=file_name)
        record = state.find_file(file_name)
        if record is None:
            return state
        return state.with_rows(record.get("data") or [])
