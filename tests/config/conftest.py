"""Fixtures for configuration tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a configuration file with a tokenizer and logging section.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to the configuration file.
    """
    path = tmp_path / "tok.yaml"
    path.write_text(
        """
tokenizer:
  strategy: boundary_scan
  strategy_param: "'-"
  downcase_text: true

logging:
  level: INFO
""",
        encoding="utf-8",
    )
    return path
