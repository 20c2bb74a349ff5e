"""Config loader.

Build configs are YAML files. Keeping them in YAML allows:
- versioned configuration across runs
- readable producer params ("max sentences: 1000")
- nested producers (a corruptor's "positive data" is itself a producer config)

The producer type is validated here, when the file is loaded, so an unknown
kind is rejected before any step attempts to run.
"""

from __future__ import annotations
from typing import Any, Dict
import yaml

from ..errors import ConfigurationError

PRODUCER_SECTION = "sentence producer"

def load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def validate_producer_params(params: Any) -> Dict[str, Any]:
    """Check the discriminant of a producer config, recursing into nested producers."""
    from ..producers.base import ProducerType, PRODUCER_TYPE_KEY, NESTED_PRODUCER_KEYS
    from ..producers.registry import is_registered

    if not isinstance(params, dict):
        raise ConfigurationError(f"producer params must be a mapping, got {type(params).__name__}")
    kind = params.get(PRODUCER_TYPE_KEY)
    # Dynamically registered kinds are valid too; only unknown strings fail
    if not (isinstance(kind, str) and is_registered(kind)):
        ProducerType.parse(kind)
    for key in NESTED_PRODUCER_KEYS:
        if key in params:
            validate_producer_params(params[key])
    return params

def load_build_config(path: str) -> Dict[str, Any]:
    cfg = load_yaml(path)
    if PRODUCER_SECTION not in cfg:
        raise ConfigurationError(f"{path}: missing '{PRODUCER_SECTION}' section")
    validate_producer_params(cfg[PRODUCER_SECTION])
    return cfg

def load_producer_config(path: str) -> Dict[str, Any]:
    """Load a YAML file holding just producer params, validated."""
    return validate_producer_params(load_yaml(path))
