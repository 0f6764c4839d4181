import os

from fzfkit.functions import remove_files, write_temporary_file


def read(path):
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def test_write_temporary_file_contents():
    path = write_temporary_file(["foo", "bar"], "\n")
    try:
        assert read(path) == "foo\nbar\n"
    finally:
        os.remove(path)


def test_write_temporary_file_name_prefix():
    path = write_temporary_file(["x"], "\x00")
    try:
        assert os.path.basename(path).startswith("fzf-temp-")
        assert read(path).endswith("\x00")
    finally:
        os.remove(path)


def test_write_temporary_file_empty_data():
    path = write_temporary_file([], "\n")
    try:
        assert read(path) == "\n"
    finally:
        os.remove(path)


def test_remove_files(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_text("1")
    second.write_text("2")
    missing = tmp_path / "missing"
    remove_files([str(first), str(missing), str(second)])
    assert not first.exists()
    assert not second.exists()
    assert not missing.exists()


def test_remove_files_after_write():
    path = write_temporary_file(["data"], "\n")
    assert read(path) == "data\n"
    remove_files([path])
    assert not os.path.exists(path)