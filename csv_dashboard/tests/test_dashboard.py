import httpx
import pytest
from dash import Dash

from csv_dashboard.dashboard.app import (
    build_layout,
    create_dashboard,
    handle_file_upload,
    handle_select_file,
    render_chart,
    selector_options,
)
from csv_dashboard.dashboard.chart import draw_chart
from csv_dashboard.dashboard.state import DashboardState
from csv_dashboard.dashboard.table import render_table
from csv_dashboard.models.csv_models import StoredFile
from csv_dashboard.services.csv_parser import CSVParseError
from conftest import SAMPLE_CSV, SAMPLE_ROWS, as_upload_contents, mock_client


def test_upload_then_select_reproduces_rows(persistence_client):
    state, prompt = handle_file_upload(
        DashboardState(), as_upload_contents(SAMPLE_CSV), "a.csv", persistence_client
    )
    assert prompt is False
    assert state.labels == ["Apples", "Plums"]
    assert state.values == [10, 2.5]
    assert state.table_rows == SAMPLE_ROWS
    assert state.file_names() == ["a.csv"]

    # A fresh page only knows what the backend returns
    page = DashboardState().with_files(persistence_client.fetch_list())
    page = handle_select_file(page, "a.csv")
    assert page.selected_file == "a.csv"
    assert page.table_rows == SAMPLE_ROWS
    assert page.labels == ["Apples", "Plums"]


def test_failed_upload_leaves_file_list_unchanged():
    client = mock_client(lambda request: httpx.Response(503, text="unavailable"))
    before = DashboardState().with_files([StoredFile(file_name="old.csv", data=[])])

    after, prompt = handle_file_upload(before, as_upload_contents(SAMPLE_CSV), "new.csv", client)

    assert prompt is False
    assert after.file_names() == ["old.csv"]
    # The parsed file is still shown locally
    assert after.table_rows == SAMPLE_ROWS


def test_missing_file_shows_prompt(persistence_client):
    state = DashboardState()
    after, prompt = handle_file_upload(state, None, None, persistence_client)
    assert prompt is True
    assert after is state


def test_parse_errors_propagate(persistence_client):
    with pytest.raises(CSVParseError):
        handle_file_upload(DashboardState(), as_upload_contents(b""), "empty.csv", persistence_client)


def test_selecting_file_without_chart_rows_gives_blank_chart_and_full_table():
    rows = [{"Name": "a", "Count": 1}, {"Name": "b", "Count": 2}]
    state = DashboardState().with_files([StoredFile(file_name="plain.csv", data=rows)])

    state = handle_select_file(state, "plain.csv")

    fig = render_chart(state)
    assert len(fig.data) == 0
    head, body = render_table(state.table_rows)
    assert len(body.children) == 2


def test_selecting_unknown_file_keeps_display():
    state = DashboardState().with_rows(SAMPLE_ROWS)
    after = handle_select_file(state, "gone.csv")
    assert after.selected_file == "gone.csv"
    assert after.table_rows == SAMPLE_ROWS


def test_failed_refresh_keeps_previous_files():
    state = DashboardState().with_files([StoredFile(file_name="a.csv", data=[])])
    assert state.with_files(None) is state


def test_state_survives_store_round_trip():
    state = DashboardState().with_rows(SAMPLE_ROWS).with_selection("x.csv")
    assert DashboardState.from_store(state.to_store()) == state
    assert DashboardState.from_store(None) == DashboardState()


def test_draw_chart_is_a_fresh_zero_based_bar_chart():
    fig = draw_chart(["a", "b"], [1, 2])
    assert len(fig.data) == 1
    assert fig.data[0].type == "bar"
    assert list(fig.data[0].x) == ["a", "b"]
    assert fig.layout.yaxis.rangemode == "tozero"
    assert draw_chart(["c"], [3]) is not fig


def test_draw_chart_rejects_mismatched_series():
    with pytest.raises(ValueError):
        draw_chart(["a"], [1, 2])


def test_render_table_uses_first_row_columns():
    head, body = render_table([{"Label": "A", "Value": None}, {"Label": "B", "Value": 2}])
    assert [th.children for th in head.children.children] == ["Label", "Value"]
    assert [td.children for td in body.children[0].children] == ["A", ""]
    assert [td.children for td in body.children[1].children] == ["B", "2"]


def test_render_table_with_no_rows():
    head, body = render_table([])
    assert head.children.children == []
    assert body.children == []


def test_selector_lists_file_names():
    state = DashboardState().with_files(
        [StoredFile(file_name="a.csv", data=[]), StoredFile(file_name="b.csv", data=[])]
    )
    assert selector_options(state) == [
        {"label": "a.csv", "value": "a.csv"},
        {"label": "b.csv", "value": "b.csv"},
    ]


def test_layout_has_dashboard_elements():
    layout = build_layout(DashboardState())
    ids = {getattr(child, "id", None) for child in layout.children}
    assert {"dashboard-state", "upload-prompt", "csv-upload", "chart-container"} <= ids


def test_create_dashboard_fetches_files(persistence_client):
    persistence_client.upload("a.csv", SAMPLE_ROWS)
    app = create_dashboard(persistence_client)
    assert isinstance(app, Dash)
