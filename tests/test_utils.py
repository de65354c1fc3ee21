"""Tests for utils: configuration loading and logging setup."""
import json
import logging
import logging.handlers
from pathlib import Path

import pytest

from utils import DEFAULT_CONFIG, load_config, setup_logging


class TestLoadConfig:
    def test_overlays_defaults(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"scene": {"seed": 3}, "visualization": {"width": 800}}))
        config = load_config(str(path))
        assert config["scene"] == {"seed": 3}
        assert config["visualization"]["width"] == 800
        assert config["visualization"]["height"] == 350
        assert config["run_control"] == DEFAULT_CONFIG["run_control"]

    def test_defaults_are_not_shared(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"run_control": {"max_steps": 10}}))
        load_config(str(path))
        assert DEFAULT_CONFIG["run_control"]["max_steps"] == 0

    @pytest.mark.parametrize("raw", [
        {"visualization": {"width": 0}},
        {"visualization": {"height": "tall"}},
        {"run_control": {"max_steps": -1}},
        {"scene": {"seed": 1.5}},
        {"scene": {"seed": True}},
        {"scene": []},
    ])
    def test_rejects_invalid_values(self, tmp_path, raw) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(raw))
        with pytest.raises(ValueError):
            load_config(str(path))

    def test_shipped_config_is_valid(self) -> None:
        config = load_config(str(Path(__file__).resolve().parent.parent / "config.json"))
        assert config["visualization"]["width"] == 512

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "absent.json"))

    def test_bad_json(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            load_config(str(path))

    def test_rejects_non_object(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError):
            load_config(str(path))


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in root.handlers:
            handler.close()
        root.handlers = handlers
        root.setLevel(level)

    def test_console_and_rotating_file(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "animation.log"
        setup_logging({"logging": {"level": "debug", "log_file": str(log_file)}})
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
        assert log_file.parent.is_dir()

    def test_console_only(self) -> None:
        setup_logging({"logging": {"log_file": ""}})
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0], logging.handlers.RotatingFileHandler)
