import json

from csv_dashboard.models.csv_models import StoredFile
from csv_dashboard.utils.data_store import CsvFileStore


def _record(name, rows):
    return StoredFile(file_name=name, data=rows)


def test_same_name_overwrites_and_keeps_position():
    store = CsvFileStore()
    store.save(_record("a.csv", [{"Label": "x", "Value": 1}]))
    store.save(_record("b.csv", []))
    store.save(_record("a.csv", [{"Label": "y", "Value": 2}]))

    files = store.list_files()
    assert [f.file_name for f in files] == ["a.csv", "b.csv"]
    assert store.get("a.csv").data == [{"Label": "y", "Value": 2}]
    assert len(files) == 2


def test_unknown_name_is_none():
    assert CsvFileStore().get("missing.csv") is None


def test_store_is_mirrored_to_json_and_reloaded(tmp_path):
    path = tmp_path / "store" / "files.json"
    store = CsvFileStore(path)
    store.save(_record("a.csv", [{"Label": "x", "Value": 1}]))

    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert on_disk == [{"fileName": "a.csv", "data": [{"Label": "x", "Value": 1}]}]

    reloaded = CsvFileStore(path)
    assert reloaded.get("a.csv").data == [{"Label": "x", "Value": 1}]


def test_missing_json_file_starts_empty(tmp_path):
    store = CsvFileStore(tmp_path / "nothing.json")
    assert store.list_files() == []
