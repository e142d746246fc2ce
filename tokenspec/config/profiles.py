"""Configuration profiles for the tokenspec package.

This module provides pre-configured profiles for interactive use,
debugging, and testing.
"""

from __future__ import annotations

from tokenspec.config.config import TokConfig
from tokenspec.config.logging import LoggingConfig

# development profile: log every tokenizer build
DEV_CONFIG = TokConfig(
    profile="dev",
    logging=LoggingConfig(
        level="DEBUG",
        format="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
    ),
)

# test profile: errors only, nothing on the console
TEST_CONFIG = TokConfig(
    profile="test",
    logging=LoggingConfig(level="ERROR", console=False),
)

PROFILES: dict[str, TokConfig] = {
    "default": TokConfig(),
    "dev": DEV_CONFIG,
    "test": TEST_CONFIG,
}
"""Registry of all available configuration profiles.

Examples
--------
>>> from tokenspec.config.profiles import PROFILES
>>> list(PROFILES.keys())
['default', 'dev', 'test']
>>> PROFILES["dev"].logging.level
'DEBUG'
"""


def get_profile(name: str) -> TokConfig:
    """Get configuration profile by name.

    Parameters
    ----------
    name : str
        Profile name. Must be one of: 'default', 'dev', 'test'.

    Returns
    -------
    TokConfig
        Copy of the configuration for the specified profile.

    Raises
    ------
    ValueError
        If profile name is not found in the registry.

    Examples
    --------
    >>> get_profile("dev").logging.level
    'DEBUG'
    >>> try:
    ...     get_profile("invalid")
    ... except ValueError as e:
    ...     print(str(e))
    Profile 'invalid' not found. Available profiles: default, dev, test
    """
    if name not in PROFILES:
        available = ", ".join(sorted(PROFILES.keys()))
        msg = f"Profile {name!r} not found. Available profiles: {available}"
        raise ValueError(msg)

    return PROFILES[name].model_copy(deep=True)


def list_profiles() -> list[str]:
    """Return list of available profile names, sorted alphabetically."""
    return sorted(PROFILES.keys())
