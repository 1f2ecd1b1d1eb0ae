"""Tests for the file helpers."""
from __future__ import annotations

import pytest

from ignix_starter.fs import JsonReadError, dump_json, ensure_dir, read_json_optional, write_text


def test_read_json_optional_missing_returns_none(tmp_path):
    """A missing file yields None."""
    assert read_json_optional(tmp_path / "absent.json") is None


def test_read_json_optional_invalid_raises(tmp_path):
    """Malformed JSON raises JsonReadError carrying the path."""
    path = tmp_path / "bad.json"
    path.write_text('{"a": ', encoding="utf-8")
    with pytest.raises(JsonReadError) as exc_info:
        read_json_optional(path)
    assert exc_info.value.path == path
    assert "invalid JSON" in exc_info.value.reason


def test_read_json_optional_bad_encoding_raises(tmp_path):
    """Bytes that are not UTF-8 raise JsonReadError."""
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"name": "caf\xe9"}')
    with pytest.raises(JsonReadError):
        read_json_optional(path)


def test_dump_json_format():
    """dump_json() uses 2-space indent, keeps non-ASCII and ends with a newline."""
    assert dump_json({"a": [1], "b": "é"}) == '{\n  "a": [\n    1\n  ],\n  "b": "é"\n}\n'


def test_ensure_dir_is_repeatable(tmp_path):
    """ensure_dir() creates parents and tolerates an existing directory."""
    target = tmp_path / "a" / "b"
    assert ensure_dir(target) == target
    assert ensure_dir(target) == target
    assert target.is_dir()


def test_write_text_missing_parent_raises(tmp_path):
    """write_text() does not create parent directories."""
    with pytest.raises(OSError):
        write_text(tmp_path / "missing" / "file.txt", "x")


def test_read_json_optional_strips_byte_order_mark(tmp_path):
    """A leading UTF-8 BOM is not part of the JSON document."""
    path = tmp_path / "bom.json"
    path.write_bytes(b'\xef\xbb\xbf{"name": "my-app"}')
    assert read_json_optional(path) == {"name": "my-app"}
