"""Configurable text tokenization.

A ``TokenizationSpec`` describes a tokenizer declaratively; ``build_tokenizer``
validates it and returns an immutable ``Tokenizer`` that turns text into a
list of token strings. Five scanning strategies are available: literal
separator split, whitespace split, Unicode word-boundary segments, Unicode
words, and a word-character boundary scan with a configurable set of extra
word characters.
"""

from __future__ import annotations

from tokenspec.tokenization.classifier import WordCharClassifier, is_default_word_char
from tokenspec.tokenization.errors import (
    BuildError,
    InvalidFilterPatternError,
    InvalidStrategyParamError,
)
from tokenspec.tokenization.scanners import (
    BoundaryScanner,
    LiteralSplitScanner,
    Scanner,
    Segment,
    UnicodeSegmentScanner,
    UnicodeWordScanner,
    WhitespaceScanner,
    word_bound_segments,
)
from tokenspec.tokenization.spec import (
    STRATEGIES,
    FilterMatchPolicy,
    TokenizationSpec,
    TokenizerStrategy,
)
from tokenspec.tokenization.tokenizer import Tokenizer, build_tokenizer

__all__ = [
    "STRATEGIES",
    "BoundaryScanner",
    "BuildError",
    "FilterMatchPolicy",
    "InvalidFilterPatternError",
    "InvalidStrategyParamError",
    "LiteralSplitScanner",
    "Scanner",
    "Segment",
    "TokenizationSpec",
    "Tokenizer",
    "TokenizerStrategy",
    "UnicodeSegmentScanner",
    "UnicodeWordScanner",
    "WhitespaceScanner",
    "WordCharClassifier",
    "build_tokenizer",
    "is_default_word_char",
    "word_bound_segments",
]
