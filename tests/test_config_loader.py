import json

import pytest

from config.config_loader import DEFAULT_CONFIG, load_config, validate_config


def write_config(tmp_path, overrides):
    overrides = {"output_directory": str(tmp_path / "logs"), **overrides}
    path = tmp_path / "runtime_config.json"
    path.write_text(json.dumps(overrides))
    return path


def test_defaults_are_valid():
    validate_config(DEFAULT_CONFIG.copy())


def test_load_merges_defaults(tmp_path):
    config = load_config(write_config(tmp_path, {"max_steps": 50}))
    assert config["max_steps"] == 50
    assert config["log_frequency"] == DEFAULT_CONFIG["log_frequency"]
    assert (tmp_path / "logs").is_dir()


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")


def test_missing_key():
    config = DEFAULT_CONFIG.copy()
    del config["max_steps"]
    with pytest.raises(ValueError, match="max_steps"):
        validate_config(config)


@pytest.mark.parametrize(
    "key, value",
    [
        ("max_steps", "100"),
        ("max_steps", True),
        ("save_trace", 1),
        ("output_directory", 3),
    ],
)
def test_wrong_type(tmp_path, key, value):
    with pytest.raises(TypeError, match=key):
        load_config(write_config(tmp_path, {key: value}))


@pytest.mark.parametrize("key", ["max_steps", "log_frequency"])
def test_non_positive(key):
    config = DEFAULT_CONFIG.copy()
    config[key] = 0
    with pytest.raises(ValueError, match=key):
        validate_config(config)


def test_negative_trace_window():
    config = DEFAULT_CONFIG.copy()
    config["trace_window"] = -1
    with pytest.raises(ValueError, match="trace_window"):
        validate_config(config)
