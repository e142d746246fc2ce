"""Root pytest configuration for tokenspec tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from tokenspec.tokenization.spec import TokenizationSpec
from tokenspec.tokenization.tokenizer import Tokenizer, build_tokenizer

GOLDEN_TEXT = (
    '"THE-BIG-RIPOFF" Mr. & Mrs. John B. Smith, cheapsite.com, 1.5 million, naïve'
)


@pytest.fixture
def golden_text() -> str:
    """Reference sentence mixing punctuation, abbreviations and numbers.

    Returns
    -------
    str
        The reference text.
    """
    return GOLDEN_TEXT


@pytest.fixture
def make_tokenizer() -> Callable[..., Tokenizer]:
    """Build tokenizers from spec keyword arguments.

    Returns
    -------
    Callable[..., Tokenizer]
        Function taking ``TokenizationSpec`` fields and returning a tokenizer.
    """

    def _make(**fields: Any) -> Tokenizer:
        return build_tokenizer(TokenizationSpec(**fields))

    return _make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove TOKSPEC_ variables inherited from the calling environment."""
    for key in list(os.environ):
        if key.startswith("TOKSPEC_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo handlers installed by ``configure_logging`` between tests."""
    yield
    logger = logging.getLogger("tokenspec")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
