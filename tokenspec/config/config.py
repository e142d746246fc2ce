"""Main configuration model for the tokenspec package."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tokenspec.config.logging import LoggingConfig
from tokenspec.tokenization.spec import TokenizationSpec


class TokConfig(BaseModel):
    """Main configuration for the tokenspec package.

    Parameters
    ----------
    profile : str
        Configuration profile name.
    tokenizer : TokenizationSpec
        Tokenizer used when no command-line options override it.
    logging : LoggingConfig
        Logging configuration.

    Examples
    --------
    >>> config = TokConfig()
    >>> config.profile
    'default'
    >>> config.tokenizer.strategy
    'whitespace'
    >>> config.logging.level
    'WARNING'
    """

    profile: str = Field(default="default", description="Configuration profile name")
    tokenizer: TokenizationSpec = Field(
        default_factory=TokenizationSpec, description="Tokenizer specification"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
