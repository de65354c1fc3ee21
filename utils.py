# utils.py
"""
Utility functions for the animation framework.

Logging setup and configuration loading: helpers shared by the entry
point that belong to neither the animation nor the rendering. The
configuration only covers the run itself (logging, seed, window and loop
control); the animation's own timing lives in constants.py.
"""
import copy
import logging
import logging.handlers
import json
import os
from typing import Dict, Any
from constants import DEFAULT_WIDTH, DEFAULT_HEIGHT

# --- Data Contracts ---
#
# load_config(path: str) -> Dict[str, Any]:
#   - Outputs: DEFAULT_CONFIG with every section overlaid by the file's
#     values. Unknown sections and keys are kept but ignored.
#   - Raises: FileNotFoundError, json.JSONDecodeError, or ValueError when
#     the file is not a JSON object, a section is not an object, or a
#     window size, step count or seed has the wrong type or sign.
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs: a config as returned by load_config. An empty "log_file"
#     disables file logging.
#   - Side Effects: Configures the root Python logger with a console handler
#     and, when a log file is set, a rotating file handler. Creates the log
#     directory if needed.

LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 5

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(levelname)s - %(message)s",
        "log_file": "logs/animation.log",
    },
    "scene": {
        "seed": None,
    },
    "visualization": {
        "width": DEFAULT_WIDTH,
        "height": DEFAULT_HEIGHT,
        "caption": "Bezier Burst",
    },
    "run_control": {
        "max_steps": 0,
        "log_throttle_steps": 600,
        "profile": False,
    },
}

def _config_error(msg: str) -> ValueError:
    logging.error(msg)
    return ValueError(msg)

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def _validate(config: Dict[str, Any], path: str) -> None:
    vis = config["visualization"]
    for key in ("width", "height"):
        if not _is_int(vis[key]) or vis[key] <= 0:
            raise _config_error(f"{path}: visualization.{key} must be a positive integer, got {vis[key]!r}.")

    run = config["run_control"]
    for key in ("max_steps", "log_throttle_steps"):
        if not _is_int(run[key]) or run[key] < 0:
            raise _config_error(f"{path}: run_control.{key} must be a non-negative integer, got {run[key]!r}.")

    seed = config["scene"]["seed"]
    if seed is not None and not _is_int(seed):
        raise _config_error(f"{path}: scene.seed must be an integer or null, got {seed!r}.")

def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file and fills in defaults per section."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            raw = json.load(f)
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise

    if not isinstance(raw, dict):
        raise _config_error(f"Configuration in {path} must be a JSON object, got {type(raw).__name__}.")

    config = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in raw.items():
        if section not in config:
            logging.warning(f"Ignoring unknown configuration section '{section}'.")
            config[section] = values
            continue
        if not isinstance(values, dict):
            raise _config_error(f"{path}: section '{section}' must be a JSON object.")
        config[section].update(values)

    _validate(config, path)
    logging.info("Configuration loaded successfully.")
    return config

def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the root logger: console always, rotating file when configured.
    """
    log_config = {**DEFAULT_CONFIG["logging"], **config.get('logging', {})}
    log_level = log_config['level'].upper()
    log_file_path = log_config['log_file']

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_config['format'])
    handlers = [logging.StreamHandler()]

    if log_file_path:
        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logging.info(f"Logging initialized at {log_level} ({log_file_path or 'console only'}).")
