"""Tokenization spec model.

A ``TokenizationSpec`` is a plain description of a tokenizer. It is checked
for field types on construction but not for meaning: a spec holding an
unparsable filter pattern is a valid value, and is only rejected when
``build_tokenizer`` is called on it.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

TokenizerStrategy = Literal[
    "split_str",
    "whitespace",
    "unicode_segment",
    "unicode_word",
    "boundary_scan",
]

FilterMatchPolicy = Literal["search", "fullmatch"]

STRATEGIES: tuple[str, ...] = get_args(TokenizerStrategy)


class TokenizationSpec(BaseModel):
    """Declarative description of a tokenizer.

    The pipeline built from a spec always runs in the same order: downcase
    the text, scan it into tokens, trim the tokens, then discard tokens
    matching the filter pattern.

    Attributes
    ----------
    strategy : TokenizerStrategy
        Scanning strategy. "split_str" splits on a literal separator and keeps
        empty pieces. "whitespace" splits on runs of whitespace.
        "unicode_segment" returns every Unicode word-boundary segment and
        "unicode_word" only the segments containing a letter or number.
        "boundary_scan" returns maximal runs of word characters.
    strategy_param : str | None
        Separator for "split_str" (None or "" splits between every
        character). Extra word characters for "boundary_scan", one per
        character of the string. Ignored by the other strategies.
    downcase_text : bool
        Lowercase the whole input before scanning.
    trim_tokens : bool
        Strip leading and trailing whitespace from every token.
    filter_pattern : str | None
        Regular expression; tokens it matches are dropped. Outside multiline
        mode, ``$`` matches only at the very end of a token.
    filter_match : FilterMatchPolicy
        How ``filter_pattern`` is applied. "search" drops a token when the
        pattern matches anywhere in it; "fullmatch" only when it matches the
        whole token.

    Examples
    --------
    >>> spec = TokenizationSpec()
    >>> spec.strategy
    'whitespace'
    >>> spec = TokenizationSpec(strategy="boundary_scan", strategy_param="'-")
    >>> spec.strategy_param
    "'-"
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    strategy: TokenizerStrategy = Field(
        default="whitespace", description="Scanning strategy"
    )
    strategy_param: str | None = Field(
        default=None,
        description="Separator (split_str) or extra word characters (boundary_scan)",
    )
    downcase_text: bool = Field(
        default=False, description="Lowercase text prior to tokenization"
    )
    trim_tokens: bool = Field(
        default=False, description="Trim leading and trailing whitespace on tokens"
    )
    filter_pattern: str | None = Field(
        default=None, description="Discard tokens matching this pattern"
    )
    filter_match: FilterMatchPolicy = Field(
        default="search", description="Filter pattern match policy"
    )
