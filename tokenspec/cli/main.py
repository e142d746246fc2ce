"""Main CLI entry point for the tokenspec package.

``tok split`` reads lines from a file or standard input and prints the
tokens of each line; ``tok spec`` shows or validates the tokenizer that the
current options and configuration resolve to.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import IO, Any

import click

from tokenspec import __version__
from tokenspec.cli.utils import (
    STRATEGY_ALIASES,
    OutputFormat,
    format_tokens,
    load_config_for_cli,
    print_error,
    print_success,
    resolve_spec,
)
from tokenspec.config import configure_logging, list_profiles, to_yaml
from tokenspec.tokenization.errors import BuildError
from tokenspec.tokenization.spec import TokenizationSpec
from tokenspec.tokenization.tokenizer import Tokenizer, build_tokenizer


def tokenizer_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the tokenizer options shared by every command."""
    options = [
        click.option(
            "--tokenizer",
            "-t",
            type=click.Choice(list(STRATEGY_ALIASES), case_sensitive=False),
            default=None,
            help="Tokenizer strategy (ss, ws, us, uw, bs); default from config",
        ),
        click.option(
            "--param",
            "-p",
            default=None,
            metavar="STR",
            help="Separator (ss) or extra word characters (bs)",
        ),
        click.option(
            "--downcase",
            "-d",
            is_flag=True,
            default=False,
            help="Downcase text prior to tokenization",
        ),
        click.option(
            "--trimmed",
            "-T",
            is_flag=True,
            default=False,
            help="Trim leading and trailing whitespace on the tokens",
        ),
        click.option(
            "--re",
            "-r",
            "regex",
            default=None,
            metavar="RE",
            help="Discard tokens matching RE",
        ),
        click.option(
            "--match",
            type=click.Choice(["search", "fullmatch"]),
            default=None,
            help="Discard tokens RE matches anywhere (search) or entirely (fullmatch)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _spec_from_context(ctx: click.Context, **options: Any) -> TokenizationSpec:
    return resolve_spec(ctx.obj["config"].tokenizer, **options)


def _build_or_exit(resolved: TokenizationSpec) -> Tokenizer:
    try:
        return build_tokenizer(resolved)
    except BuildError as e:
        print_error(str(e), exit_code=0)
        click.get_current_context().exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="tok")
@click.option(
    "--config-file",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: use profile defaults)",
)
@click.option(
    "--profile",
    type=click.Choice(list_profiles(), case_sensitive=False),
    default="default",
    help="Configuration profile to use",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Log tokenizer construction details",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    profile: str,
    verbose: bool,
) -> None:
    r"""Split text into tokens with a configurable tokenizer.

    \b
    Examples:
        # Whitespace tokens of each line of a file
        $ tok split notes.txt

        # Word-character runs, keeping apostrophes and hyphens inside words
        $ echo "don't-stop" | tok split -t bs -p "'-"

        # Lowercased Unicode words, dropping purely numeric tokens
        $ tok split -t uw -d -r '^[0-9]+$' notes.txt

        # Show the tokenizer a config file resolves to
        $ tok --config-file tok.yaml spec show
    """
    ctx.ensure_object(dict)
    config = load_config_for_cli(config_file, profile.lower(), verbose)
    configure_logging(config.logging)
    ctx.obj["config"] = config


@cli.command()
@click.argument("file", type=click.File("rb"), default="-")
@tokenizer_options
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["repr", "json", "tsv"]),
    default="repr",
    help="Output format for each line's tokens",
)
@click.pass_context
def split(
    ctx: click.Context,
    file: IO[bytes],
    format_type: OutputFormat,
    **options: Any,
) -> None:
    """Print the tokens of every line of FILE (default: standard input).

    Lines end at line feeds only: a carriage return just before a line feed
    is dropped and any other carriage return stays in the line. FILE must
    be UTF-8 text.
    """
    tokenizer = _build_or_exit(_spec_from_context(ctx, **options))
    for raw in file:
        line = raw.decode("utf-8").removesuffix("\n").removesuffix("\r")
        click.echo(format_tokens(tokenizer.tokens(line), format_type))


@cli.group()
def spec() -> None:
    """Inspect the resolved tokenization spec."""


@spec.command()
@tokenizer_options
@click.option(
    "--all",
    "include_defaults",
    is_flag=True,
    default=False,
    help="Include fields left at their default values",
)
@click.pass_context
def show(ctx: click.Context, include_defaults: bool, **options: Any) -> None:
    """Print the resolved spec as YAML."""
    resolved = _spec_from_context(ctx, **options)
    click.echo(to_yaml(resolved, include_defaults=include_defaults), nl=False)


@spec.command()
@tokenizer_options
@click.pass_context
def validate(ctx: click.Context, **options: Any) -> None:
    """Build the resolved spec and report whether it is valid."""
    tokenizer = _build_or_exit(_spec_from_context(ctx, **options))
    print_success(f"Valid {tokenizer.spec.strategy} tokenizer")


def main() -> None:
    """Run the ``tok`` command."""
    cli(obj={})


if __name__ == "__main__":
    main()
