"""Tokenizer pipeline and the factory that builds it from a spec.

Text to tokens recipe:

1. downcase the text (optional)
2. scan the text with the resolved scanner
3. trim whitespace around each token (optional)
4. discard tokens matching the filter pattern (optional)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import regex

from tokenspec.tokenization.classifier import WordCharClassifier
from tokenspec.tokenization.errors import (
    InvalidFilterPatternError,
    InvalidStrategyParamError,
)
from tokenspec.tokenization.scanners import (
    BoundaryScanner,
    LiteralSplitScanner,
    Scanner,
    UnicodeSegmentScanner,
    UnicodeWordScanner,
    WhitespaceScanner,
)
from tokenspec.tokenization.spec import FilterMatchPolicy, TokenizationSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tokenizer:
    """A compiled, immutable tokenizer.

    Instances are created by ``build_tokenizer`` and hold no mutable state,
    so one tokenizer can serve any number of calls from any thread.

    Attributes
    ----------
    spec : TokenizationSpec
        The spec the tokenizer was built from.
    scanner : Scanner
        Resolved scanning strategy.
    filter_re : regex.Pattern[str] | None
        Compiled filter pattern, if any.

    Examples
    --------
    >>> tokenizer = build_tokenizer(TokenizationSpec(downcase_text=True))
    >>> tokenizer.tokens("The Cat  sat")
    ['the', 'cat', 'sat']
    """

    spec: TokenizationSpec
    scanner: Scanner
    filter_re: regex.Pattern[str] | None = None

    @property
    def filter_match(self) -> FilterMatchPolicy:
        """How the filter pattern is applied to tokens."""
        return self.spec.filter_match

    def is_filtered(self, token: str) -> bool:
        """Return whether ``token`` is discarded by the filter pattern.

        Parameters
        ----------
        token : str
            Candidate token.

        Returns
        -------
        bool
            True if the token matches the filter under the configured
            policy; always False when no filter is set.
        """
        if self.filter_re is None:
            return False
        if self.spec.filter_match == "fullmatch":
            return self.filter_re.fullmatch(token) is not None
        return self.filter_re.search(token) is not None

    def tokens(self, text: str) -> list[str]:
        """Tokenize ``text``.

        Parameters
        ----------
        text : str
            Input text.

        Returns
        -------
        list[str]
            Tokens in scan order. May be empty and may contain empty or
            duplicate strings, depending on the strategy.
        """
        if self.spec.downcase_text:
            text = text.lower()

        words = self.scanner.scan(text)
        if self.spec.trim_tokens:
            words = (word.strip() for word in words)

        if self.filter_re is None:
            return list(words)
        return [word for word in words if not self.is_filtered(word)]

    def __call__(self, text: str) -> list[str]:
        """Tokenize ``text``; alias for ``tokens``."""
        return self.tokens(text)


def _check_param(spec: TokenizationSpec) -> None:
    param = spec.strategy_param
    if param is not None and any("\ud800" <= char <= "\udfff" for char in param):
        raise InvalidStrategyParamError(
            spec.strategy, param, "parameter contains unpaired surrogate codepoints"
        )


def anchor_end_of_text(pattern: str) -> str:
    """Rewrite every unescaped ``$`` outside a character class to ``\\Z``.

    Without the multiline flag, ``$`` also matches just before a trailing
    newline; ``\\Z`` matches only at the very end of the token.

    Parameters
    ----------
    pattern : str
        Regular expression source.

    Returns
    -------
    str
        The pattern with end-of-line anchors replaced.

    Examples
    --------
    >>> anchor_end_of_text(r"^[0-9]+$")
    '^[0-9]+\\\\Z'
    >>> anchor_end_of_text(r"\\$[$]")
    '\\\\$[$]'
    """
    out: list[str] = []
    in_class = False
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\":
            out.append(pattern[i : i + 2])
            i += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
            # a "]" right after "[" or "[^" is a literal
            end = i + 1
            if pattern.startswith("^", end):
                end += 1
            if pattern.startswith("]", end):
                end += 1
            out.append(pattern[i:end])
            i = end
            continue
        elif char == "$":
            char = r"\Z"
        out.append(char)
        i += 1
    return "".join(out)


def _compile_filter(pattern: str | None) -> regex.Pattern[str] | None:
    if pattern is None:
        return None
    try:
        compiled = regex.compile(pattern)
    except regex.error as e:
        raise InvalidFilterPatternError(pattern, e.msg, position=e.pos) from e
    if compiled.flags & regex.MULTILINE:
        return compiled
    return regex.compile(anchor_end_of_text(pattern))


def _resolve_scanner(spec: TokenizationSpec) -> Scanner:
    match spec.strategy:
        case "split_str":
            return LiteralSplitScanner(spec.strategy_param or "")
        case "whitespace":
            return WhitespaceScanner()
        case "unicode_segment":
            return UnicodeSegmentScanner()
        case "unicode_word":
            return UnicodeWordScanner()
        case "boundary_scan":
            return BoundaryScanner(WordCharClassifier(spec.strategy_param or ""))
        case _:
            raise InvalidStrategyParamError(
                str(spec.strategy), spec.strategy_param, "unknown tokenizer strategy"
            )


def build_tokenizer(spec: TokenizationSpec) -> Tokenizer:
    """Build a tokenizer from a spec.

    All validation happens here; the returned tokenizer cannot fail.

    Parameters
    ----------
    spec : TokenizationSpec
        Tokenizer description.

    Returns
    -------
    Tokenizer
        Ready-to-use tokenizer.

    Raises
    ------
    InvalidFilterPatternError
        If ``filter_pattern`` does not compile.
    InvalidStrategyParamError
        If ``strategy_param`` is not valid text, or the strategy is unknown.

    Examples
    --------
    >>> spec = TokenizationSpec(strategy="split_str", strategy_param=",")
    >>> build_tokenizer(spec).tokens("a,,b")
    ['a', '', 'b']
    """
    _check_param(spec)
    scanner = _resolve_scanner(spec)
    filter_re = _compile_filter(spec.filter_pattern)

    logger.debug(
        "Built %s tokenizer (param=%r, downcase=%s, trim=%s, filter=%r/%s)",
        spec.strategy,
        spec.strategy_param,
        spec.downcase_text,
        spec.trim_tokens,
        spec.filter_pattern,
        spec.filter_match,
    )
    return Tokenizer(spec=spec, scanner=scanner, filter_re=filter_re)
