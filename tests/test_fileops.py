import os

import pytest

from samkit.fileops import copy_file


def test_copy_returns_size_and_content(tmp_path):
    data = os.urandom(200_000)
    source = tmp_path / "in.bin"
    source.write_bytes(data)
    target = tmp_path / "out.bin"
    assert copy_file(source, target) == len(data)
    assert target.read_bytes() == data


def test_copy_empty_file(tmp_path):
    source = tmp_path / "empty"
    source.write_bytes(b"")
    target = tmp_path / "copy"
    assert copy_file(source, target) == 0
    assert target.read_bytes() == b""


def test_existing_target_is_truncated(tmp_path):
    source = tmp_path / "short"
    source.write_bytes(b"abc")
    target = tmp_path / "long"
    target.write_bytes(b"x" * 1000)
    assert copy_file(str(source), str(target)) == 3
    assert target.read_bytes() == b"abc"


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "missing", tmp_path / "out")
    assert not (tmp_path / "out").exists()


def test_bad_target_raises(tmp_path):
    source = tmp_path / "in"
    source.write_bytes(b"data")
    with pytest.raises(FileNotFoundError):
        copy_file(source, tmp_path / "no-such-dir" / "out")