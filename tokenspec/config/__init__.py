"""Configuration system for the tokenspec package.

Examples
--------
>>> from tokenspec.config import TokConfig, get_profile
>>> TokConfig().tokenizer.strategy
'whitespace'
>>> get_profile("dev").logging.level
'DEBUG'
"""

from __future__ import annotations

from tokenspec.config.config import TokConfig
from tokenspec.config.env import ENV_PREFIX, env_to_nested_dict, load_from_env
from tokenspec.config.loader import load_config, load_spec, load_yaml_file, merge_configs
from tokenspec.config.logging import LoggingConfig, configure_logging
from tokenspec.config.profiles import (
    DEV_CONFIG,
    PROFILES,
    TEST_CONFIG,
    get_profile,
    list_profiles,
)
from tokenspec.config.serialization import save_yaml, spec_to_dict, to_yaml

__all__ = [
    "DEV_CONFIG",
    "ENV_PREFIX",
    "PROFILES",
    "TEST_CONFIG",
    "LoggingConfig",
    "TokConfig",
    "configure_logging",
    "env_to_nested_dict",
    "get_profile",
    "list_profiles",
    "load_config",
    "load_from_env",
    "load_spec",
    "load_yaml_file",
    "merge_configs",
    "save_yaml",
    "spec_to_dict",
    "to_yaml",
]
