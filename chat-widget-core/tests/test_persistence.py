import json

import pytest

from chat_widget_core.conversation.data_models.session import Session
from chat_widget_core.conversation.data_models.theme import Theme
from chat_widget_core.persistence.base import SESSION_KEY, THEME_KEY, InMemoryKeyValueStore
from chat_widget_core.persistence.json_file import JSONFileKeyValueStore
from chat_widget_core.persistence.session_store import SessionStore
from chat_widget_core.persistence.theme_preference import DEFAULT_THEME, ThemePreference


def test_session_round_trip_through_fresh_store(tmp_path):
    path = tmp_path / "state.json"
    session = Session.create("Grace Hopper", "grace@example.com")
    SessionStore(JSONFileKeyValueStore(path)).save(session)

    loaded = SessionStore(JSONFileKeyValueStore(path)).load()

    assert loaded == session
    assert loaded.session_id == session.session_id


def test_session_is_persisted_with_wire_field_names(store):
    session = Session(name="Ada", email="ada@example.com", session_id="abc123")
    SessionStore(store).save(session)
    assert json.loads(store.get(SESSION_KEY)) == {"name": "Ada", "email": "ada@example.com", "sessionId": "abc123"}


def test_missing_session_loads_as_none(store):
    assert SessionStore(store).load() is None


@pytest.mark.parametrize(
    "raw",
    [
        "not json at all",
        '{"name": "Ada"}',
        '{"name": "", "email": "a@b.c", "sessionId": "x"}',
        "[1, 2, 3]",
    ],
)
def test_malformed_session_loads_as_none(raw):
    store = InMemoryKeyValueStore({SESSION_KEY: raw})
    assert SessionStore(store).load() is None


def test_clear_removes_session(store):
    sessions = SessionStore(store)
    sessions.save(Session.create("Ada", "ada@example.com"))
    sessions.clear()
    assert sessions.load() is None
    sessions.clear()


def test_session_ids_are_generated_once():
    first = Session.create("Ada", "ada@example.com")
    second = Session.create("Ada", "ada@example.com")
    assert first.session_id != second.session_id


def test_session_fields_are_stripped_and_required():
    session = Session.create("  Ada  ", " ada@example.com ")
    assert (session.name, session.email) == ("Ada", "ada@example.com")
    with pytest.raises(ValueError):
        Session.create("   ", "ada@example.com")


def test_theme_round_trip(store):
    ThemePreference(store).save(Theme.DARK)
    assert store.get(THEME_KEY) == "dark"
    assert ThemePreference(store).load() is Theme.DARK


def test_unknown_theme_loads_as_none():
    preference = ThemePreference(InMemoryKeyValueStore({THEME_KEY: "sepia"}))
    assert preference.load() is None
    assert preference.resolve() is DEFAULT_THEME


@pytest.mark.parametrize(
    "theme, system_prefers_dark, expected",
    [
        (Theme.DARK, False, True),
        (Theme.DARK, True, True),
        (Theme.LIGHT, True, False),
        (Theme.LIGHT, False, False),
        (Theme.SYSTEM, True, True),
        (Theme.SYSTEM, False, False),
    ],
)
def test_effective_is_dark(theme, system_prefers_dark, expected):
    assert ThemePreference.effective_is_dark(theme, system_prefers_dark) is expected


def test_json_store_treats_corrupt_file_as_empty(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{ this is not json", encoding="utf-8")
    store = JSONFileKeyValueStore(path)
    assert store.get(THEME_KEY) is None

    store.set(THEME_KEY, "light")
    assert json.loads(path.read_text(encoding="utf-8")) == {THEME_KEY: "light"}


@pytest.mark.parametrize("raw", [b"\xff\xfe", b'{"chat-theme": "dark\xff\xfe"}'])
def test_json_store_treats_undecodable_file_as_empty(tmp_path, raw):
    path = tmp_path / "state.json"
    path.write_bytes(raw)
    store = JSONFileKeyValueStore(path)
    assert store.get(THEME_KEY) is None
    assert SessionStore(store).load() is None

    store.set(THEME_KEY, "dark")
    assert JSONFileKeyValueStore(path).get(THEME_KEY) == "dark"


def test_json_store_creates_parent_directories_and_keeps_other_keys(tmp_path):
    path = tmp_path / "nested" / "dir" / "state.json"
    store = JSONFileKeyValueStore(path)
    store.set(THEME_KEY, "dark")
    store.set(SESSION_KEY, "{}")
    store.delete(SESSION_KEY)
    store.delete("never-set")

    assert JSONFileKeyValueStore(path).get(THEME_KEY) == "dark"
    assert JSONFileKeyValueStore(path).get(SESSION_KEY) is None
    assert list(path.parent.glob("*.tmp")) == []


def test_json_store_default_path_follows_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert JSONFileKeyValueStore().path == tmp_path / "botlab-chat" / "state.json"
