"""Declarative, reusable text tokenizers.

Describe a tokenizer with a ``TokenizationSpec``, build it once with
``build_tokenizer``, then call ``Tokenizer.tokens`` on as many strings as
needed.
"""

from __future__ import annotations

from tokenspec.tokenization import (
    BuildError,
    FilterMatchPolicy,
    InvalidFilterPatternError,
    InvalidStrategyParamError,
    TokenizationSpec,
    Tokenizer,
    TokenizerStrategy,
    build_tokenizer,
)

__version__ = "0.1.0"

__all__ = [
    "BuildError",
    "FilterMatchPolicy",
    "InvalidFilterPatternError",
    "InvalidStrategyParamError",
    "TokenizationSpec",
    "Tokenizer",
    "TokenizerStrategy",
    "__version__",
    "build_tokenizer",
]
