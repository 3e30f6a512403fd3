"""
This module loads the optional YAML configuration for the dictionary fixer.

Example config.yml:

    Aws:
      Region: us-east-1
    Logging:
      LogLevel: 20
    WordList:
      Encoding: utf-8
"""

import copy
import logging
import os

import yaml

CONFIG_PATH = "config.yml"
CONFIG_ENV_VAR = "DICT_FIXER_CONFIG"

DEFAULT_CONFIG = {
    "Aws": {"Region": "us-east-1"},
    "Logging": {"LogLevel": logging.INFO},
    "WordList": {"Encoding": "utf-8"},
}

logger = logging.getLogger(__name__)


def resolve_config_path(path: str = None) -> str:  # type: ignore
    return path or os.environ.get(CONFIG_ENV_VAR) or CONFIG_PATH


def load_config(path: str = None) -> dict:  # type: ignore
    """
    Loads the configuration file and merges it over the defaults.

    A missing file is not an error. An unreadable or malformed file is logged and the defaults are used.

    Args:
        path (str): Path to the YAML file. Falls back to $DICT_FIXER_CONFIG, then config.yml.

    Returns:
        dict: The configuration with every top-level section present.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = resolve_config_path(path)

    if not os.path.exists(config_path):
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as file:
            loaded = yaml.safe_load(file) or {}
    except (OSError, yaml.YAMLError) as err:
        logger.error(f"An error occurred while loading configuration file {config_path}: {err}")
        return config

    if not isinstance(loaded, dict):
        logger.error(f"Configuration file {config_path} is not a mapping, using defaults")
        return config

    # Merge each section over the defaults, ignoring empty sections
    for section, values in loaded.items():
        if values is None:
            continue
        if section in DEFAULT_CONFIG and not isinstance(values, dict):
            logger.error(f"Section {section} in configuration file {config_path} is not a mapping, using defaults")
            continue
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values

    return config
