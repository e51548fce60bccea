"""Tests for runtime config loading."""

import json
from pathlib import Path

import pytest

from config.config_loader import DEFAULT_CONFIG, load_config, validate_config


def write_config(tmp_path, overrides):
    path = tmp_path / "runtime_config.json"
    path.write_text(json.dumps(overrides), encoding="utf-8")
    return path


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_merged(self, tmp_path):
        out_dir = tmp_path / "out"
        path = write_config(tmp_path, {"max_steps": 50, "output_directory": str(out_dir)})
        config = load_config(str(path), verbose=False)
        assert config["max_steps"] == 50
        assert config["log_frequency"] == DEFAULT_CONFIG["log_frequency"]
        assert out_dir.is_dir()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.json"))

    def test_summary_printed(self, tmp_path, capsys):
        path = write_config(tmp_path, {"output_directory": str(tmp_path / "out")})
        load_config(str(path))
        assert "max_steps" in capsys.readouterr().out

    def test_wrong_type(self, tmp_path):
        path = write_config(tmp_path, {"max_steps": "lots", "output_directory": str(tmp_path)})
        with pytest.raises(TypeError):
            load_config(str(path), verbose=False)

    def test_shipped_config_is_valid(self):
        shipped = Path(__file__).resolve().parent.parent / "config" / "runtime_config.json"
        with open(shipped, "r", encoding="utf-8") as f:
            config = json.load(f)
        validate_config(config)


class TestValidateConfig:
    """Tests for validate_config."""

    def test_missing_key(self):
        config = DEFAULT_CONFIG.copy()
        del config["trace_enabled"]
        with pytest.raises(ValueError):
            validate_config(config)

    def test_bool_is_not_an_int(self):
        config = {**DEFAULT_CONFIG, "max_steps": True}
        with pytest.raises(TypeError):
            validate_config(config)

    def test_log_frequency_positive(self):
        config = {**DEFAULT_CONFIG, "log_frequency": 0}
        with pytest.raises(ValueError):
            validate_config(config)

    def test_negative_budget(self):
        config = {**DEFAULT_CONFIG, "max_steps": -1}
        with pytest.raises(ValueError):
            validate_config(config)
