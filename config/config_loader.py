import json
import os
from datetime import datetime

DEFAULT_CONFIG = {
    "max_steps": 1_000_000,
    "log_frequency": 10_000,
    "trace_enabled": False,
    "output_directory": "logs/",
    "log_file_prefix": "tm_run_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": int,
    "log_frequency": int,
    "trace_enabled": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is an int subclass, keep it out of the int keys
        if not isinstance(config[key], expected_type) or (expected_type is int and isinstance(config[key], bool)):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if config["max_steps"] < 0:
        raise ValueError("max_steps must be zero or positive.")
    if config["log_frequency"] < 1:
        raise ValueError("log_frequency must be at least 1.")

def load_config(path="config/runtime_config.json", verbose=True):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    # Validate schema
    validate_config(config)

    # Validate output directory
    os.makedirs(config["output_directory"], exist_ok=True)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value}")

    return config
