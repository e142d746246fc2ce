"""Test fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide Click CLI test runner.

    Returns
    -------
    CliRunner
        Click test runner.
    """
    return CliRunner()


@pytest.fixture
def mock_config_file(tmp_path: Path) -> Path:
    """Create a tok.yaml config file selecting a comma splitter.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to the config file.
    """
    config_path = tmp_path / "tok.yaml"
    config_path.write_text(
        """
profile: default

tokenizer:
  strategy: split_str
  strategy_param: ","
  trim_tokens: true
"""
    )
    return config_path


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    """Create a two-line text file.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to the text file.
    """
    path = tmp_path / "input.txt"
    path.write_text("The cat sat\non the mat\n", encoding="utf-8")
    return path
