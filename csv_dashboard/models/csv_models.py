# csv_dashboard/models/csv_models.py

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Scalar = Optional[Union[str, int, float, bool]]
Row = Dict[str, Any]


class StoredFile(BaseModel):
    """
    One uploaded CSV as the storage API keeps it: the original file name
    plus the parsed rows. Serialized with the camelCase `fileName` key.
    """

    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName", min_length=1)
    data: List[Row] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class UploadRequest(StoredFile):
    pass


class UploadAck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    message: str
    file_name: str = Field(alias="fileName")
    rows: int
