import json

from taskboard.storage import JsonFileStorage, MemoryStorage


def test_memory_missing_key_is_none():
    storage = MemoryStorage()
    assert storage.get_item("todo_theme") is None


def test_memory_set_and_get():
    storage = MemoryStorage()
    storage.set_item("todo_theme", "dark")
    assert storage.get_item("todo_theme") == "dark"


def test_memory_overwrite():
    storage = MemoryStorage({"todo_theme": "light"})
    storage.set_item("todo_theme", "dark")
    assert storage.get_item("todo_theme") == "dark"


def test_memory_remove():
    storage = MemoryStorage({"todo_token": "token"})
    storage.remove_item("todo_token")
    assert storage.get_item("todo_token") is None


def test_memory_remove_missing_keeps_others():
    storage = MemoryStorage({"todo_theme": "system"})
    storage.remove_item("todo_token")
    assert storage.get_item("todo_theme") == "system"


def test_memory_initial_items_are_copied():
    source = {"todo_theme": "dark"}
    storage = MemoryStorage(source)
    source["todo_theme"] = "light"
    assert storage.get_item("todo_theme") == "dark"


def test_file_missing_returns_none(tmp_path):
    storage = JsonFileStorage(tmp_path / "state.json")
    assert storage.get_item("todo_user") is None


def test_file_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "state.json"
    JsonFileStorage(path).set_item("todo_theme", "dark")
    assert JsonFileStorage(path).get_item("todo_theme") == "dark"


def test_file_contents_are_json_object(tmp_path):
    path = tmp_path / "state.json"
    storage = JsonFileStorage(path)
    storage.set_item("todo_theme", "dark")
    storage.set_item("todo_token", "token")
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "todo_theme": "dark",
        "todo_token": "token",
    }


def test_file_remove(tmp_path):
    path = tmp_path / "state.json"
    storage = JsonFileStorage(path)
    storage.set_item("todo_token", "token")
    storage.remove_item("todo_token")
    assert JsonFileStorage(path).get_item("todo_token") is None


def test_file_corrupt_contents_treated_as_empty(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")
    storage = JsonFileStorage(path)
    assert storage.get_item("todo_theme") is None
    storage.set_item("todo_theme", "light")
    assert storage.get_item("todo_theme") == "light"