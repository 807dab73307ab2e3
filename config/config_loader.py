import json
import os
from datetime import datetime

DEFAULT_CONFIG = {
    "max_steps": 10_000,
    "log_frequency": 100,
    "trace_window": 10,
    "save_trace": False,
    "validate_before_run": True,
    "output_directory": "logs/",
    "log_file_prefix": "turing_",
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": int,
    "log_frequency": int,
    "trace_window": int,
    "save_trace": bool,
    "validate_before_run": bool,
    "output_directory": str,
    "log_file_prefix": str,
}

POSITIVE_KEYS = ["max_steps", "log_frequency"]


def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        value = config[key]
        # bool is a subclass of int
        if expected_type is int and isinstance(value, bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")
        if not isinstance(value, expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    for key in POSITIVE_KEYS:
        if config[key] <= 0:
            raise ValueError(f"Config key '{key}' must be positive, got {config[key]}.")
    if config["trace_window"] < 0:
        raise ValueError(f"Config key 'trace_window' must not be negative, got {config['trace_window']}.")


def load_config(path="config/runtime_config.json", verbose=False):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
