# csv_dashboard/routers/csv_files.py

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from csv_dashboard.models.csv_models import UploadAck, UploadRequest
from csv_dashboard.utils.data_store import CsvFileStore, get_store

router = APIRouter(prefix="/api", tags=["CSV Files"])


@router.get("/get_csv_files")
def get_csv_files(store: CsvFileStore = Depends(get_store)) -> List[Dict[str, Any]]:
    """
    Every stored upload as {fileName, data}, in upload order.
    """
    return [record.to_payload() for record in store.list_files()]


@router.post("/upload_csv")
def upload_csv(req: UploadRequest, store: CsvFileStore = Depends(get_store)) -> Dict[str, Any]:
    """
    Stores parsed CSV rows under their file name.
    An existing file with the same name is overwritten.
    """
    store.save(req)
    ack = UploadAck(
        message=f"CSV uploaded. Stored {len(req.data)} rows.",
        file_name=req.file_name,
        rows=len(req.data),
    )
    return ack.model_dump(by_alias=True)
