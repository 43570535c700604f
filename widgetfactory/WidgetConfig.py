"""
WidgetConfig - Loads widget defaults from JSON.

Configuration is a plain nested dict. Values from the JSON file override
DEFAULT_CONFIG key by key; sections or keys missing from the file keep
their defaults.
"""
import copy
import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict = {
    'integer_field': {
        'strict_columns': 4,
        'lenient_columns': None,
        'bell_on_reject': True,
        'revert_on_focus_out': True
    },
    'flow_panel': {
        'vertical_gap': 8
    }
}


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict:
    """Load configuration from JSON file merged over DEFAULT_CONFIG.

    Args:
        config_path: Path to widgets_config.json; defaults only when None

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If the file does not contain a JSON object
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is None:
        return config

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        overrides = json.load(f)

    if not isinstance(overrides, dict):
        raise ValueError(f"Config file must contain a JSON object: {config_path}")

    _merge(config, overrides)
    logger.info("Widget config loaded from %s", path)
    return config


def section(config: Optional[Dict], name: str) -> Dict:
    """
    Args:
        config: Configuration dictionary, or None for defaults
        name: Top-level section name

    Returns:
        Section dict with defaults filled in
    """
    merged = copy.deepcopy(DEFAULT_CONFIG.get(name, {}))
    if config:
        merged.update(config.get(name, {}))
    return merged


def _merge(base: Dict, overrides: Dict) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
