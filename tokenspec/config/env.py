"""Environment variable support for configuration.

Variables such as ``TOKSPEC_TOKENIZER__DOWNCASE_TEXT=true`` are turned into
nested dictionaries that can be merged into a configuration. Values stay
strings; pydantic coerces them to the field types ("true", "1", "yes" and
"on" are accepted for booleans). Strings are kept as-is because tokenizer
parameters such as a separator of "," must not be reinterpreted.
"""

from __future__ import annotations

import os
from typing import Any

ENV_PREFIX = "TOKSPEC_"


def env_to_nested_dict(env_vars: dict[str, str], prefix: str) -> dict[str, Any]:
    """Convert flat environment variables to nested dictionary.

    Parameters
    ----------
    env_vars : dict[str, str]
        Environment variables to convert.
    prefix : str
        Prefix to strip from variable names.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary.

    Examples
    --------
    >>> env_vars = {"TOKSPEC_LOGGING__LEVEL": "DEBUG"}
    >>> env_to_nested_dict(env_vars, "TOKSPEC_")
    {'logging': {'level': 'DEBUG'}}
    """
    result: dict[str, Any] = {}

    for key, value in env_vars.items():
        if not key.startswith(prefix):
            continue

        # split on double underscore for nesting
        parts = [part.lower() for part in key[len(prefix) :].split("__")]

        current = result
        for part in parts[:-1]:
            current = current.setdefault(part, {})
        current[parts[-1]] = value

    return result


def load_from_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load configuration values from environment variables.

    Parameters
    ----------
    prefix : str
        Environment variable prefix to filter on.

    Returns
    -------
    dict[str, Any]
        Nested configuration dictionary from environment.

    Examples
    --------
    >>> # With env var: TOKSPEC_TOKENIZER__STRATEGY=boundary_scan
    >>> load_from_env()
    {'tokenizer': {'strategy': 'boundary_scan'}}
    """
    env_vars = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
    return env_to_nested_dict(env_vars, prefix)
