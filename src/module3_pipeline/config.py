# file: src/module3_pipeline/config.py

"""
Configuration loading.

Configuration is a plain dict read from YAML and merged over hardcoded
defaults. See default_config.yaml for the documented keys.
"""

import codecs
import copy
import os
from typing import Any, Dict, Optional

import yaml

from module1_hamming_codec import CODES

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")

MASK_POLICIES = ("resize", "clear")


class ConfigError(Exception):
    """Raised when a configuration file is unreadable or invalid."""
    pass


def _get_default_config() -> Dict[str, Any]:
    return {
        "system": {
            "verbose": False,
            "log_level": "INFO",
        },
        "hamming": {
            "code": "eh16_11",
        },
        "channel": {
            "error_probability": 0.0,
            "seed": None,
        },
        "pipeline": {
            "mask_policy": "resize",
            "text_encoding": "utf-8",
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check the values the pipeline depends on.

    Raises:
        ConfigError: On an unknown code, mask policy or text encoding, a bad
                     probability or a bad seed
    """
    code_name = str(config["hamming"]["code"]).lower()
    if code_name not in CODES:
        raise ConfigError(
            f"Unknown hamming.code {code_name!r} (available: {', '.join(sorted(CODES))})"
        )

    policy = config["pipeline"]["mask_policy"]
    if policy not in MASK_POLICIES:
        raise ConfigError(
            f"pipeline.mask_policy must be one of {MASK_POLICIES}, got {policy!r}"
        )

    probability = config["channel"]["error_probability"]
    if not isinstance(probability, (int, float)) or not 0.0 <= probability <= 1.0:
        raise ConfigError(
            f"channel.error_probability must be in [0, 1], got {probability!r}"
        )

    validate_seed(config["channel"]["seed"])

    encoding = config["pipeline"]["text_encoding"]
    try:
        codecs.lookup(str(encoding))
    except LookupError as e:
        raise ConfigError(f"pipeline.text_encoding: unknown encoding {encoding!r}") from e

    return config


def validate_seed(seed: Any) -> Optional[int]:
    """
    Check a random seed: None or a non-negative integer.

    Raises:
        ConfigError: On any other value (including booleans)
    """
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
        raise ConfigError(
            f"channel.seed must be null or a non-negative integer, got {seed!r}"
        )
    return seed


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file merged over the defaults.

    Args:
        config_path: Path to a YAML file. If None, the packaged
                     default_config.yaml is used.

    Returns:
        Configuration dictionary

    Raises:
        ConfigError: If the file cannot be read, is not a mapping, or holds
                     invalid values
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
        if not os.path.exists(config_path):
            return _get_default_config()

    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot load config {config_path}: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config {config_path} must contain a mapping")

    return validate_config(_merge(_get_default_config(), loaded))
