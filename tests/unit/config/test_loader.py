"""Tests for configuration loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError
import pytest

from daypath.core.config.loader import configure_logging, detect_format, load_app_config, load_config
from daypath.core.config.models import AppConfig, LoggingConfig, MappingConfig
from daypath.core.curves.fitting import FitStrategy


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", "json"), ("a.JSON", "json"), ("a.yaml", "yaml"), ("a.yml", "yaml")],
    )
    def test_known_formats(self, name: str, expected: str) -> None:
        assert detect_format(name) == expected

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unsupported config format: .toml"):
            detect_format("a.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.json"
        path.write_text(json.dumps({"mapping": {"max_points": 32}}), encoding="utf-8")
        assert load_config(path) == {"mapping": {"max_points": 32}}

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.yaml"
        path.write_text("mapping:\n  fit_strategy: symmetric_arm\n", encoding="utf-8")
        assert load_config(path) == {"mapping": {"fit_strategy": "symmetric_arm"}}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_missing(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="does not exist"):
            load_config(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_json_array_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.yaml"
        path.write_text("mapping: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_yaml_scalar_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "cfg.yaml"
        path.write_text("just a string\n", encoding="utf-8")
        with pytest.raises(ValueError, match="expected a mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for load_app_config and the config models."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_app_config(tmp_path / "daypath.yaml")
        assert config == AppConfig()
        assert config.mapping.max_error_px == 0.75
        assert config.mapping.max_points == 64
        assert config.mapping.coarse_steps == 25
        assert config.mapping.fit_strategy is FitStrategy.CATMULL_ROM

    def test_reads_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "daypath.yaml"
        path.write_text(
            "mapping:\n  max_error_px: 0.5\n  fit_strategy: adaptive_sharpness\n"
            "logging:\n  level: DEBUG\n  structured: true\n"
            "editor:\n  theme: dark\n",
            encoding="utf-8",
        )
        config = load_app_config(path)
        assert config.mapping.max_error_px == 0.5
        assert config.mapping.fit_strategy is FitStrategy.ADAPTIVE_SHARPNESS
        assert config.logging.level == "DEBUG"
        assert config.logging.structured is True

    @pytest.mark.parametrize(
        "mapping",
        [{"max_error_px": 0}, {"max_points": 1}, {"coarse_steps": 0}, {"fit_strategy": "bspline"}, {"extra": 1}],
    )
    def test_invalid_mapping_rejected(self, tmp_path: Path, mapping: dict) -> None:
        path = tmp_path / "daypath.json"
        path.write_text(json.dumps({"mapping": mapping}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_invalid_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_mapping_config_is_frozen(self) -> None:
        config = MappingConfig()
        with pytest.raises(ValidationError):
            config.max_points = 8  # type: ignore[misc]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_applies_level(self) -> None:
        configure_logging(AppConfig(logging=LoggingConfig(level="WARNING")))
        assert logging.getLogger().level == logging.WARNING
        configure_logging(AppConfig(logging=LoggingConfig(level="INFO")))
        assert logging.getLogger().level == logging.INFO

    def test_writes_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "daypath.log"
        configure_logging(AppConfig(logging=LoggingConfig(level="INFO", filename=str(log_file))))
        logging.getLogger("daypath.test").info("hello file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")
        configure_logging(AppConfig())
