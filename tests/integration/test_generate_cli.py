#!/usr/bin/env python3
"""
Integration tests for the ``generate`` command - full run against a work folder.

Git is pointed at a missing executable, so upload dates come from folder
modification times.
"""

import json
import os

import pytest
from typer.testing import CliRunner

from manga_catalog.main import app

ENV_NAMES = ("MANGA_CONFIG_FILE", "MANGA_CATALOG_FILE", "MANGA_GIT_EXECUTABLE")


@pytest.fixture
def clean_env():
    old_values = {name: os.environ.pop(name, None) for name in ENV_NAMES}
    yield
    for name, value in old_values.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def work_root(tmp_path, clean_env):
    (tmp_path / ".env").write_text("MANGA_GIT_EXECUTABLE=definitely-not-git-xyz\n")
    (tmp_path / "manga-config.json").write_text(
        json.dumps({
            "title": "CLI Work",
            "repoOwner": "me",
            "repoName": "repo",
            "status": "END",
            "endChapter": "2",
            "lockedChapters": [],
        })
    )
    for identity in ("oneshot", "1", "2"):
        folder = tmp_path / identity
        folder.mkdir()
        # 2024-06-01T00:00:00Z
        os.utime(folder, (1717200000, 1717200000))
    (tmp_path / "2" / "manifest.json").write_text(json.dumps({"pages": ["a", "b"]}))
    return tmp_path


def test_generate_writes_catalog(cli_runner, work_root):
    result = cli_runner.invoke(app, ["generate", "--root", str(work_root)])

    assert result.exit_code == 0, result.output
    assert "Total chapters: 3" in result.output

    data = json.loads((work_root / "manga.json").read_text(encoding="utf-8"))
    assert list(data["chapters"]) == ["oneshot", "1", "2"]
    assert data["chapters"]["oneshot"]["chapter"] == 0
    assert data["chapters"]["2"]["pages"] == 2
    assert data["chapters"]["1"]["uploadDate"] == "2024-06-01T07:00:00+07:00"
    assert data["work"]["endChapter"] == "2"
    assert all(chapter["views"] == 0 for chapter in data["chapters"].values())


def test_generate_without_configuration_exits_with_error(cli_runner, work_root):
    (work_root / "manga-config.json").unlink()

    result = cli_runner.invoke(app, ["generate", "--root", str(work_root)])

    assert result.exit_code == 1
    assert not (work_root / "manga.json").exists()
