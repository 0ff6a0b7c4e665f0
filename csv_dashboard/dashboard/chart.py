# csv_dashboard/dashboard/chart.py

from typing import List, Union

import plotly.graph_objects as go

CHART_ELEMENT_ID = "dataChart"
DATASET_LABEL = "Data from CSV"
BAR_FILL = "rgba(75, 192, 192, 0.2)"
BAR_BORDER = "rgba(75, 192, 192, 1)"


def draw_chart(labels: List[str], values: List[Union[int, float]]) -> go.Figure:
    """
    Build a fresh vertical bar chart for the graph element.

    A new figure is returned on every call so the previous chart is dropped
    wholesale instead of having traces stacked onto it.
    """
    if len(labels) != len(values):
        raise ValueError(f"labels ({len(labels)}) and values ({len(values)}) differ in length")

    fig = go.Figure(
        data=[
            go.Bar(
                x=list(labels),
                y=list(values),
                name=DATASET_LABEL,
                marker=dict(
                    color=BAR_FILL,
                    line=dict(color=BAR_BORDER, width=1),
                ),
            )
        ]
    )
    fig.update_layout(showlegend=True, autosize=True)
    fig.update_yaxes(rangemode="tozero")
    return fig


def blank_chart() -> go.Figure:
    fig = go.Figure()
    fig.update_yaxes(rangemode="tozero")
    return fig
