"""CLI utility functions for the tokenspec package.

This module provides configuration loading, option resolution, output
formatting and user-facing messages for the ``tok`` command.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Literal

import click
import yaml
from rich.console import Console
from rich.markup import escape

from tokenspec.config import TokConfig, load_config
from tokenspec.tokenization.spec import TokenizationSpec, TokenizerStrategy

# tokens go to stdout; messages go to stderr
console = Console(stderr=True)

OutputFormat = Literal["repr", "json", "tsv"]

STRATEGY_ALIASES: dict[str, TokenizerStrategy] = {
    "ss": "split_str",
    "splitstr": "split_str",
    "split_str": "split_str",
    "ws": "whitespace",
    "whitespace": "whitespace",
    "us": "unicode_segment",
    "unicode_segment": "unicode_segment",
    "uw": "unicode_word",
    "unicode_word": "unicode_word",
    "bs": "boundary_scan",
    "boundary_scan": "boundary_scan",
    "rb": "boundary_scan",
    "regexboundary": "boundary_scan",
}


def load_config_for_cli(
    config_file: Path | None,
    profile: str,
    verbose: bool,
) -> TokConfig:
    """Load configuration with CLI options.

    Exits with status 1 after printing the problem if the configuration
    cannot be loaded.

    Parameters
    ----------
    config_file : Path | None
        Path to configuration file (None to use profile defaults).
    profile : str
        Configuration profile name.
    verbose : bool
        Whether to force DEBUG logging.

    Returns
    -------
    TokConfig
        Loaded configuration object.
    """
    overrides = {"logging__level": "DEBUG"} if verbose else {}
    try:
        return load_config(config_path=config_file, profile=profile, **overrides)
    except FileNotFoundError:
        print_error(f"Configuration file not found: {config_file}", exit_code=0)
        click.get_current_context().exit(1)
    except (yaml.YAMLError, ValueError) as e:
        print_error(f"Failed to load configuration: {e}", exit_code=0)
        click.get_current_context().exit(1)


def resolve_spec(
    base: TokenizationSpec,
    tokenizer: str | None = None,
    param: str | None = None,
    downcase: bool = False,
    trimmed: bool = False,
    regex: str | None = None,
    match: str | None = None,
) -> TokenizationSpec:
    """Apply command-line tokenizer options on top of a configured spec.

    Options left unset keep the configured value; flags can only switch a
    setting on.

    Parameters
    ----------
    base : TokenizationSpec
        Spec from the configuration.
    tokenizer : str | None
        Strategy name or alias.
    param : str | None
        Strategy parameter.
    downcase : bool
        Force downcasing.
    trimmed : bool
        Force token trimming.
    regex : str | None
        Filter pattern.
    match : str | None
        Filter match policy.

    Returns
    -------
    TokenizationSpec
        The resolved spec.

    Examples
    --------
    >>> resolve_spec(TokenizationSpec(), tokenizer="rb", param="'").strategy
    'boundary_scan'
    """
    updates: dict[str, object] = {}
    if tokenizer is not None:
        updates["strategy"] = STRATEGY_ALIASES[tokenizer.lower()]
    if param is not None:
        updates["strategy_param"] = param
    if downcase:
        updates["downcase_text"] = True
    if trimmed:
        updates["trim_tokens"] = True
    if regex is not None:
        updates["filter_pattern"] = regex
    if match is not None:
        updates["filter_match"] = match
    return TokenizationSpec.model_validate(base.model_dump() | updates)


def format_tokens(tokens: list[str], format_type: OutputFormat) -> str:
    """Format one line's tokens for output.

    Parameters
    ----------
    tokens : list[str]
        Tokens to format.
    format_type : {"repr", "json", "tsv"}
        "repr" prints a Python list literal, "json" a JSON array, "tsv" the
        tokens joined by tabs.

    Returns
    -------
    str
        Formatted tokens.

    Raises
    ------
    ValueError
        If format_type is invalid.

    Examples
    --------
    >>> format_tokens(["a", "b"], "json")
    '["a", "b"]'
    """
    if format_type == "repr":
        return repr(tokens)
    elif format_type == "json":
        return json.dumps(tokens, ensure_ascii=False)
    elif format_type == "tsv":
        return "\t".join(tokens)
    else:
        raise ValueError(f"Invalid format type: {format_type}")


def print_error(message: str, exit_code: int = 1) -> None:
    """Print error message and exit.

    Parameters
    ----------
    message : str
        Error message to display.
    exit_code : int
        Exit code (default: 1). Pass 0 to not exit.
    """
    console.print(f"[red]✗ Error:[/red] {escape(message)}")
    if exit_code != 0:
        sys.exit(exit_code)


def print_success(message: str) -> None:
    """Print success message.

    Parameters
    ----------
    message : str
        Success message to display.
    """
    console.print(f"[green]✓ {escape(message)}[/green]")
