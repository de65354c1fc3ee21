"""Tests for main: the entry point end to end, headless."""
import json
import logging

import pytest

from main import main


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_missing_config_is_fatal(tmp_path, capsys) -> None:
    main(str(tmp_path / "absent.json"))
    assert "FATAL" in capsys.readouterr().out


def test_runs_for_max_steps(tmp_path) -> None:
    log_file = tmp_path / "logs" / "animation.log"
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "logging": {"level": "INFO", "log_file": str(log_file)},
        "scene": {"seed": 5},
        "visualization": {"width": 128, "height": 96},
        "run_control": {"max_steps": 50, "log_throttle_steps": 0, "profile": True},
    }))
    main(str(path))
    text = log_file.read_text()
    assert "Animation loop finished after 50 frames." in text
    assert "Performance Profile" in text
