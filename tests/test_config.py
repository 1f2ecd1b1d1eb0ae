"""
Tests for the YAML starter file loader and logging setup.
"""
from __future__ import annotations

import logging

import pytest

from ignix_starter.config import StarterFileResult, load_starter_file, setup_logging


def _write(tmp_path, text: str):
    path = tmp_path / "starter.yaml"
    path.write_text(text, encoding="utf-8")
    return path


# ─────────────────────────────────────────────────────────────────────────────
# load_starter_file
# ─────────────────────────────────────────────────────────────────────────────

def test_load_minimal_file(tmp_path):
    """Only target is required; skip and verbose take their defaults."""
    result = load_starter_file(_write(tmp_path, "target: ./ui\n"))
    assert isinstance(result, StarterFileResult)
    assert result.target == tmp_path / "ui"
    assert result.skip == ()
    assert result.verbose is False


def test_load_full_file(tmp_path):
    """Absolute target, skip list and verbose flag are all read."""
    abs_target = tmp_path / "abs"
    path = _write(
        tmp_path,
        f"target: {abs_target}\nskip: [readme, gitignore]\nverbose: true\n",
    )
    result = load_starter_file(path)
    assert result.target == abs_target
    assert result.skip == ("readme", "gitignore")
    assert result.verbose is True


def test_missing_file_raises(tmp_path):
    """A missing starter file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_starter_file(tmp_path / "nope.yaml")


def test_missing_target_raises(tmp_path):
    """A file without target raises ValueError."""
    with pytest.raises(ValueError, match="'target' field is required"):
        load_starter_file(_write(tmp_path, "verbose: true\n"))


def test_empty_file_raises(tmp_path):
    """An empty file has no target and raises ValueError."""
    with pytest.raises(ValueError):
        load_starter_file(_write(tmp_path, ""))


def test_non_mapping_raises(tmp_path):
    """A top-level YAML list is rejected."""
    with pytest.raises(ValueError, match="mapping"):
        load_starter_file(_write(tmp_path, "- a\n- b\n"))


def test_skip_must_be_list(tmp_path):
    """A scalar skip value is rejected."""
    with pytest.raises(ValueError, match="'skip' must be a list"):
        load_starter_file(_write(tmp_path, "target: ui\nskip: readme\n"))


def test_unknown_skip_name_raises(tmp_path):
    """Unknown artifact names in skip are rejected."""
    with pytest.raises(ValueError, match="Unknown artifact"):
        load_starter_file(_write(tmp_path, "target: ui\nskip: [webpack]\n"))


def test_result_builds_scaffolder_that_honours_skip(tmp_path):
    """scaffolder() carries the configured skip list."""
    result = load_starter_file(_write(tmp_path, "target: ui\nskip: [readme]\n"))
    report = result.scaffolder().scaffold(result.target)
    assert not (result.target / "README.md").exists()
    assert (result.target / "package.json").exists()
    assert report.skipped == ["readme"]


# ─────────────────────────────────────────────────────────────────────────────
# setup_logging
# ─────────────────────────────────────────────────────────────────────────────

def test_setup_logging_levels(monkeypatch):
    """verbose selects DEBUG, otherwise INFO; the root config is always forced."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    setup_logging(verbose=True)
    setup_logging(verbose=False)
    assert [c["level"] for c in calls] == [logging.DEBUG, logging.INFO]
    assert all(c["force"] is True for c in calls)


# ─────────────────────────────────────────────────────────────────────────────
# StarterFileResult.run
# ─────────────────────────────────────────────────────────────────────────────

def test_run_applies_verbose_and_scaffolds(tmp_path, monkeypatch):
    """run() configures DEBUG logging for verbose files and scaffolds the target."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    result = load_starter_file(
        _write(tmp_path, "target: ui\nskip: [readme]\nverbose: true\n")
    )
    report = result.run()
    assert [c["level"] for c in calls] == [logging.DEBUG]
    assert report.root == tmp_path / "ui"
    assert report.skipped == ["readme"]
    assert (tmp_path / "ui" / "package.json").exists()
    assert not (tmp_path / "ui" / "README.md").exists()


def test_run_defaults_to_info_logging(tmp_path, monkeypatch):
    """Without verbose, run() configures INFO logging."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    StarterFileResult(target=tmp_path / "app").run()
    assert [c["level"] for c in calls] == [logging.INFO]
    assert (tmp_path / "app" / "tsconfig.json").exists()
