import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from notedesk.bridge.commands import CommandDispatcher, CommandResult, build_dispatcher


@pytest.fixture
def dispatcher():
    return build_dispatcher()


def test_registered_commands(dispatcher):
    assert dispatcher.commands() == ["list_notes", "read_note", "save_note"]


def test_save_read_list(dispatcher, tmp_path):
    p = os.path.join(str(tmp_path), "n.md")

    res = dispatcher.invoke("save_note", {"path": p, "content": "hello"})
    assert res == CommandResult(ok=True, value=None)

    res = dispatcher.invoke("read_note", {"path": p})
    assert res.ok and res.value == "hello"

    res = dispatcher.invoke("list_notes", {"dir": str(tmp_path)})
    assert res.ok and res.value == [p]


def test_missing_dir_error_string(dispatcher, tmp_path):
    res = dispatcher.invoke("list_notes", {"dir": str(tmp_path / "nope")})
    assert not res.ok
    assert res.value is None
    assert res.error == "Directory does not exist"


def test_read_missing_is_error(dispatcher, tmp_path):
    res = dispatcher.invoke("read_note", {"path": str(tmp_path / "nope.md")})
    assert not res.ok
    assert isinstance(res.error, str) and res.error


def test_unknown_command(dispatcher):
    res = dispatcher.invoke("delete_note", {"path": "x"})
    assert res.error == "Unknown command: delete_note"


def test_missing_arg(dispatcher):
    res = dispatcher.invoke("save_note", {"path": "x.md"})
    assert not res.ok
    assert res.error.startswith("invalid args `content` for command `save_note`")


def test_non_string_arg(dispatcher):
    res = dispatcher.invoke("read_note", {"path": 42})
    assert not res.ok
    assert "expected a string, got int" in res.error


def test_extra_args_ignored(dispatcher, tmp_path):
    res = dispatcher.invoke("list_notes", {"dir": str(tmp_path), "recursive": True})
    assert res.ok and res.value == []


def test_duplicate_register():
    d = CommandDispatcher()
    d.register("ping", lambda: "pong")
    with pytest.raises(ValueError):
        d.register("ping", lambda: "pong")
    assert d.invoke("ping").value == "pong"


def test_payload():
    assert CommandResult.success(["a"]).to_payload() == {"ok": True, "value": ["a"]}
    assert CommandResult.failure("boom").to_payload() == {"ok": False, "error": "boom"}


def test_unexpected_handler_error_is_failure():
    def broken(path):
        raise OSError("device gone")

    d = CommandDispatcher()
    d.register("read_note", broken, "path")
    res = d.invoke("read_note", {"path": "x.md"})
    assert res == CommandResult(ok=False, error="device gone")
