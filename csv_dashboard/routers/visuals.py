# csv_dashboard/routers/visuals.py

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from csv_dashboard.services.visuals_engine import build_chart_series
from csv_dashboard.utils.data_store import CsvFileStore, get_store

router = APIRouter(prefix="/api/visuals", tags=["Visuals"])


@router.get("/{file_name}")
def visuals(file_name: str, store: CsvFileStore = Depends(get_store)) -> Dict[str, Any]:
    """
    Returns chart-ready arrays (labels + values) for one stored file.
    """
    record = store.get(file_name)
    if record is None:
        raise HTTPException(status_code=404, detail=f"No uploaded file named {file_name}")
    return build_chart_series(record.data).model_dump()
