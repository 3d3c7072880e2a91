"""Tests for environment settings."""

from pathlib import Path

import pytest

from helena_argparser.config import load_settings
from helena_argparser.errors import ConfigError


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    settings = load_settings({})

    assert settings.source_dir == Path(tmp_path).resolve()
    assert settings.build_dir == Path(tmp_path).resolve() / "build"
    assert settings.cmake is None
    assert settings.log_file is None


def test_explicit_values(tmp_path):
    settings = load_settings(
        {
            "HELENA_SOURCE_DIR": str(tmp_path),
            "HELENA_BUILD_DIR": str(tmp_path / "out"),
            "HELENA_CMAKE": "/opt/cmake",
            "HELENA_LOG_FILE": str(tmp_path / "helena.log"),
        }
    )

    assert settings.source_dir == Path(tmp_path).resolve()
    assert settings.build_dir == tmp_path / "out"
    assert settings.cmake == "/opt/cmake"
    assert settings.log_file == str(tmp_path / "helena.log")


def test_relative_build_dir_resolves_against_source(tmp_path):
    settings = load_settings({"HELENA_SOURCE_DIR": str(tmp_path), "HELENA_BUILD_DIR": "out/debug"})

    assert settings.build_dir == Path(tmp_path).resolve() / "out" / "debug"


def test_blank_values_are_unset(tmp_path):
    settings = load_settings(
        {"HELENA_SOURCE_DIR": str(tmp_path), "HELENA_CMAKE": "   ", "HELENA_LOG_FILE": ""}
    )

    assert settings.cmake is None
    assert settings.log_file is None


def test_source_dir_must_be_directory(tmp_path):
    not_a_dir = tmp_path / "file.txt"
    not_a_dir.write_text("x", encoding="utf-8")

    with pytest.raises(ConfigError, match="not a directory"):
        load_settings({"HELENA_SOURCE_DIR": str(not_a_dir)})
