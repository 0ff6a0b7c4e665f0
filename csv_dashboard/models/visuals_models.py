# csv_dashboard/models/visuals_models.py

from typing import List, Union

from pydantic import BaseModel, Field

Number = Union[int, float]


class ChartSeries(BaseModel):
    labels: List[str] = Field(default_factory=list)
    values: List[Number] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.labels or not self.values
