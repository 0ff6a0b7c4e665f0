# csv_dashboard/services/visuals_engine.py

import math
from typing import Any, List, Optional, Tuple, Union

from csv_dashboard.models.csv_models import Row
from csv_dashboard.models.visuals_models import ChartSeries

LABEL_FIELD = "Label"
VALUE_FIELD = "Value"


def _chart_value(raw: Any) -> Optional[Union[int, float]]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        return raw
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def build_chart_series(rows: List[Row]) -> ChartSeries:
    """
    Converts parsed CSV rows into chart-ready arrays.

    A row counts only when both its Label and Value are present and truthy.
    Everything else is skipped here but stays in the table.
    """
    labels: List[str] = []
    values: List[Union[int, float]] = []

    for row in rows:
        if not isinstance(row, dict):
            continue  # skip malformed rows

        label = row.get(LABEL_FIELD)
        raw_value = row.get(VALUE_FIELD)

        if not label or not raw_value:
            continue

        value = _chart_value(raw_value)
        if value is None:
            continue

        labels.append(str(label))
        values.append(value)

    return ChartSeries(labels=labels, values=values)


def process_rows(rows: List[Row]) -> Tuple[ChartSeries, List[Row]]:
    """
    Row processor used for both fresh uploads and re-selected files.
    Returns the chart series and the untouched rows for tabular display.
    """
    return build_chart_series(rows), rows
