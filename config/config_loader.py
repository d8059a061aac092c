import json
import os
from pathlib import Path

from rich.console import Console

console = Console()

DEFAULT_CONFIG_PATH = str(Path(__file__).resolve().parent / "runtime_config.json")

DEFAULT_CONFIG = {
    "max_steps": 1_000_000,
    "trace": False,
    "color": True,
    "log_results": True,
    "output_directory": "logs/",
    "log_file_prefix": "turing_",
    "results_file": "results/results.jsonl"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": int,
    "trace": bool,
    "color": bool,
    "log_results": bool,
    "output_directory": str,
    "log_file_prefix": str,
    "results_file": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is a subclass of int, so max_steps=True would otherwise pass
        if expected_type is int and isinstance(config[key], bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if config["max_steps"] <= 0:
        raise ValueError("max_steps must be a positive step budget.")

def load_config(path=DEFAULT_CONFIG_PATH, verbose=False):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    validate_config(config)

    if verbose:
        console.print("[bold]Loaded config:[/bold]")
        for key, value in config.items():
            console.print(f"  {key}: {value}")

    return config

def save_config(config, path=DEFAULT_CONFIG_PATH):
    validate_config(config)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
