# csv_dashboard/dashboard/app.py

import base64
import logging
from typing import Any, Dict, List, Optional, Tuple

import plotly.graph_objects as go
from dash import Dash, Input, Output, State, dcc, html
from dash.exceptions import PreventUpdate

from csv_dashboard import config
from csv_dashboard.dashboard.chart import CHART_ELEMENT_ID, blank_chart, draw_chart
from csv_dashboard.dashboard.state import DashboardState
from csv_dashboard.dashboard.table import TABLE_STYLE, render_table
from csv_dashboard.services.csv_parser import parse_csv
from csv_dashboard.services.persistence_client import PersistenceClient

logger = logging.getLogger(__name__)

STATE_STORE_ID = "dashboard-state"
UPLOAD_ID = "csv-upload"
PROMPT_ID = "upload-prompt"
TABLE_ID = "csv-table"
SELECTOR_ID = "file-selector"

MISSING_FILE_PROMPT = "Please select a CSV file first."
SELECTOR_PLACEHOLDER = "Select a file to view"


def decode_upload_contents(contents: str) -> bytes:
    """
    dcc.Upload hands over a data URL ("data:text/csv;base64,...").
    """
    if "," not in contents:
        raise ValueError("Invalid upload payload.")
    _meta, b64 = contents.split(",", 1)
    return base64.b64decode(b64)


# ---------------------------------------------------------
# STATE TRANSITIONS
# ---------------------------------------------------------

def handle_file_upload(
    state: DashboardState,
    contents: Optional[str],
    filename: Optional[str],
    client: PersistenceClient,
) -> Tuple[DashboardState, bool]:
    """
    Parse the chosen file, show it, then persist it.
    Returns the new state and whether to show the missing-file prompt.
    Parser errors are not caught here.
    """
    if not contents or not filename:
        return state, True

    rows = parse_csv(decode_upload_contents(contents))
    state = state.with_rows(rows)
    return state.with_files(client.upload(filename, rows)), False


def handle_select_file(state: DashboardState, file_name: Optional[str]) -> DashboardState:
    if not file_name:
        return state
    return state.with_selection(file_name)


def render_chart(state: DashboardState) -> go.Figure:
    if not state.labels or not state.values:
        return blank_chart()
    return draw_chart(state.labels, state.values)


def selector_options(state: DashboardState) -> List[Dict[str, str]]:
    return [{"label": name, "value": name} for name in state.file_names()]


# ---------------------------------------------------------
# LAYOUT
# ---------------------------------------------------------

def build_layout(state: DashboardState) -> html.Div:
    return html.Div([
        html.H1("Dashboard: CSV Data Visualization"),
        dcc.Store(id=STATE_STORE_ID, storage_type="memory", data=state.to_store()),
        dcc.ConfirmDialog(id=PROMPT_ID, message=MISSING_FILE_PROMPT),
        dcc.Upload(
            id=UPLOAD_ID,
            accept=".csv",
            multiple=False,
            children=html.Div(["Drag and drop or ", html.A("select a CSV file")]),
            style={
                "borderWidth": "1px",
                "borderStyle": "dashed",
                "padding": "12px",
                "textAlign": "center",
            },
        ),
        html.Div(
            id="chart-container",
            children=dcc.Graph(id=CHART_ELEMENT_ID, figure=render_chart(state)),
        ),
        html.Div([
            html.H2("CSV Data Table"),
            html.Table(id=TABLE_ID, style=TABLE_STYLE, children=render_table(state.table_rows)),
        ]),
        html.Div([
            html.H2("Uploaded Files"),
            dcc.Dropdown(
                id=SELECTOR_ID,
                options=selector_options(state),
                placeholder=SELECTOR_PLACEHOLDER,
                clearable=False,
            ),
        ]),
    ])


def create_dashboard(client: Optional[PersistenceClient] = None) -> Dash:
    """
    Build the Dash app. The stored-file list is fetched on every page load.
    """
    client = client or PersistenceClient(config.BACKEND_URL)
    app = Dash(__name__, title="CSV Dashboard")

    def serve_layout():
        return build_layout(DashboardState().with_files(client.fetch_list()))

    app.layout = serve_layout

    @app.callback(
        Output(STATE_STORE_ID, "data", allow_duplicate=True),
        Output(PROMPT_ID, "displayed"),
        Input(UPLOAD_ID, "contents"),
        State(UPLOAD_ID, "filename"),
        State(STATE_STORE_ID, "data"),
        prevent_initial_call=True,
    )
    def on_upload(contents, filename, data):
        state, prompt = handle_file_upload(
            DashboardState.from_store(data), contents, filename, client
        )
        return state.to_store(), prompt

    @app.callback(
        Output(STATE_STORE_ID, "data", allow_duplicate=True),
        Input(SELECTOR_ID, "value"),
        State(STATE_STORE_ID, "data"),
        prevent_initial_call=True,
    )
    def on_select(file_name, data):
        if not file_name:
            raise PreventUpdate
        return handle_select_file(DashboardState.from_store(data), file_name).to_store()

    @app.callback(
        Output(CHART_ELEMENT_ID, "figure"),
        Output(TABLE_ID, "children"),
        Output(SELECTOR_ID, "options"),
        Input(STATE_STORE_ID, "data"),
    )
    def on_state_change(data: Dict[str, Any]):
        state = DashboardState.from_store(data)
        return render_chart(state), render_table(state.table_rows), selector_options(state)

    return app


def main() -> None:
    config.configure_logging()
    app = create_dashboard()
    logger.info("Dashboard using backend %s", config.BACKEND_URL)
    app.run(host=config.DASHBOARD_HOST, port=config.DASHBOARD_PORT, debug=config.DASHBOARD_DEBUG)


if __name__ == "__main__":
    main()
