# csv_dashboard/dashboard/table.py

from typing import Any, List

from dash import html

from csv_dashboard.models.csv_models import Row

TABLE_STYLE = {"border": "1px solid", "borderCollapse": "collapse"}
CELL_STYLE = {"border": "1px solid", "padding": "2px 6px"}


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def render_table(rows: List[Row]) -> List[Any]:
    """
    Header from the first row's keys; every row rendered in that column order.
    """
    columns = list(rows[0].keys()) if rows else []

    head = html.Thead(html.Tr([html.Th(col, style=CELL_STYLE) for col in columns]))
    body = html.Tbody([
        html.Tr([html.Td(_cell_text(row.get(col)), style=CELL_STYLE) for col in columns])
        for row in rows
    ])
    return [head, body]
