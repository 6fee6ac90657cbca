"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from scenesemantics.configuration import SceneSemanticsSettings


def test_defaults_match_tap_query_constants(monkeypatch) -> None:
    monkeypatch.delenv("SCENESEMANTICS_PROXIMITY_THRESHOLD", raising=False)
    monkeypatch.delenv("SCENESEMANTICS_CUTOFF_DISTANCE", raising=False)
    settings = SceneSemanticsSettings()
    assert settings.proximity_threshold == pytest.approx(0.05)
    assert settings.cutoff_distance == pytest.approx(4.0)
    assert settings.mesh_provider == "static"


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SCENESEMANTICS_CUTOFF_DISTANCE", "2.5")
    monkeypatch.setenv("SCENESEMANTICS_EXPORT_DIRECTORY", str(tmp_path / "out"))
    settings = SceneSemanticsSettings()
    assert settings.cutoff_distance == pytest.approx(2.5)
    assert settings.export_directory == (tmp_path / "out").resolve()


def test_paths_expand_user(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    settings = SceneSemanticsSettings(export_directory="~/Documents/ObjFile")
    assert settings.export_directory == (tmp_path / "Documents" / "ObjFile").resolve()
    assert isinstance(settings.export_directory, Path)


def test_rejects_non_positive_threshold() -> None:
    with pytest.raises(ValidationError):
        SceneSemanticsSettings(proximity_threshold=0)


def test_log_level_is_normalised(monkeypatch) -> None:
    monkeypatch.setenv("SCENESEMANTICS_LOG_LEVEL", " warning ")
    assert SceneSemanticsSettings().log_level == "WARNING"


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(ValidationError):
        SceneSemanticsSettings(log_level="chatty")
