import pytest

from fzfkit.history import History

MAX_HISTORY = 50


def test_directory_is_invalid(tmp_path):
    with pytest.raises(ValueError):
        History(str(tmp_path), MAX_HISTORY)


def test_missing_parent_is_invalid(tmp_path):
    with pytest.raises(ValueError):
        History(str(tmp_path / "missing" / "history"), MAX_HISTORY)


def test_missing_file_is_created(tmp_path):
    path = tmp_path / "history"
    history = History(str(path), MAX_HISTORY)
    assert path.exists()
    assert history.lines == [""]
    assert history.current() == ""


def test_history_round_trip(tmp_path):
    path = str(tmp_path / "history")
    open(path, "w").close()

    history = History(path, MAX_HISTORY)
    for _ in range(MAX_HISTORY + 10):
        history.append("foobar")

    history = History(path, MAX_HISTORY)
    assert len(history.lines) == MAX_HISTORY + 1
    assert history.lines[:MAX_HISTORY] == ["foobar"] * MAX_HISTORY

    history = History(path, MAX_HISTORY)
    history.append("barfoo")
    history.append("")
    history.append("foobarbaz")

    history = History(path, MAX_HISTORY)
    assert len(history.lines) == MAX_HISTORY + 1
    assert history.lines[MAX_HISTORY - 3] == "foobar"
    assert history.lines[MAX_HISTORY - 2] == "barfoo"
    assert history.lines[MAX_HISTORY - 1] == "foobarbaz"


def test_browsing_and_override(tmp_path):
    path = tmp_path / "history"
    path.write_text("first\nsecond\n")
    history = History(str(path), MAX_HISTORY)
    assert history.lines == ["first", "second", ""]

    history.override("typing")
    assert history.current() == "typing"
    assert history.previous() == "second"
    assert history.previous() == "first"
    assert history.previous() == "first"

    history.override("edited")
    assert history.current() == "edited"
    assert history.next() == "second"
    assert history.next() == "typing"
    assert history.next() == "typing"
    assert history.previous() == "second"
    assert history.previous() == "edited"
    assert path.read_text() == "first\nsecond\n"


def test_append_writes_file(tmp_path):
    path = tmp_path / "history"
    history = History(str(path), 2)
    history.append("a")
    history.append("b")
    history.append("c")
    assert path.read_text() == "b\nc\n"
    assert history.lines == ["b", "c", ""]