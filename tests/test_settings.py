from __future__ import annotations

from pathlib import Path

import pytest

from gitcontrib.core.log_aggregator import COMMIT_SENTINEL
from gitcontrib.settings import Settings, load_settings


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    settings = load_settings(str(tmp_path / "absent.yaml"))

    assert settings == Settings()
    assert settings.sentinel == COMMIT_SENTINEL
    assert settings.log_level == "WARNING"


def test_environment_variable_lookup(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("log_level: debug\n")
    monkeypatch.setenv("GITCONTRIB_CONFIG", str(config))

    assert load_settings().log_level == "DEBUG"


def test_values_are_read(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text(
        "log_level: INFO\n"
        f"log_file: {tmp_path / 'logs' / 'run.log'}\n"
        f"profile_path: {tmp_path / '.bashrc'}\n"
    )

    settings = load_settings(str(config))

    assert settings.log_level == "INFO"
    assert settings.log_file == str(tmp_path / "logs" / "run.log")
    assert settings.resolved_profile_path == str(tmp_path / ".bashrc")


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("")

    assert load_settings(str(config)) == Settings()


def test_non_mapping_is_rejected(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("- a\n- b\n")

    with pytest.raises(ValueError):
        load_settings(str(config))


def test_invalid_yaml_is_reported_as_value_error(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("log_level: [unclosed\n")

    with pytest.raises(ValueError, match="not valid YAML"):
        load_settings(str(config))
