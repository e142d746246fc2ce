"""Scanning strategies that turn text into raw tokens.

Every scanner implements ``Scanner.scan``, which lazily yields the tokens
of a string in order. Calling ``scan`` again starts a fresh pass, so a
scanner can be shared freely.

The two Unicode scanners delegate segmentation to the ``regex`` package,
whose ``WORD`` flag gives ``\\b`` the default Unicode word boundary
semantics of UAX #29. The boundary scanner is a single hand-written pass
driven by a ``WordCharClassifier``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Literal, NamedTuple

import regex

from tokenspec.tokenization.classifier import WordCharClassifier

_UNICODE_WORD_BOUNDARY = regex.compile(r"\b", flags=regex.WORD)
_NON_WHITESPACE = regex.compile(r"[^\p{White_Space}]+")

SegmentKind = Literal["token", "boundary"]


class Segment(NamedTuple):
    """A run of the boundary scanner's input.

    Attributes
    ----------
    kind : SegmentKind
        "token" for a run of word characters, "boundary" for a run of
        separators.
    text : str
        The run itself.
    """

    kind: SegmentKind
    text: str


class Scanner(ABC):
    """Abstract base class for scanning strategies."""

    @abstractmethod
    def scan(self, text: str) -> Iterator[str]:
        """Yield the raw tokens of ``text`` in order.

        Parameters
        ----------
        text : str
            Input text.

        Yields
        ------
        str
            Raw tokens.
        """
        ...


@dataclass(frozen=True)
class LiteralSplitScanner(Scanner):
    """Splits on every occurrence of a literal separator.

    All pieces are kept, so leading, trailing and adjacent separators
    produce empty tokens. An empty separator splits between every
    character and adds an empty token at each end.

    Examples
    --------
    >>> list(LiteralSplitScanner(",").scan(",a,,b"))
    ['', 'a', '', 'b']
    >>> list(LiteralSplitScanner("").scan("ab"))
    ['', 'a', 'b', '']
    """

    separator: str = ""

    def scan(self, text: str) -> Iterator[str]:
        if not self.separator:
            # str.split rejects an empty separator
            yield ""
            yield from text
            yield ""
            return
        yield from text.split(self.separator)


@dataclass(frozen=True)
class WhitespaceScanner(Scanner):
    """Splits on runs of Unicode whitespace, dropping the whitespace.

    Whitespace is the Unicode ``White_Space`` property, so the ASCII
    information separators U+001C..U+001F stay inside tokens.
    """

    def scan(self, text: str) -> Iterator[str]:
        for match in _NON_WHITESPACE.finditer(text):
            yield match.group()


def word_bound_segments(text: str) -> Iterator[str]:
    """Yield the text between consecutive Unicode word boundaries.

    Parameters
    ----------
    text : str
        Input text.

    Yields
    ------
    str
        Segments whose concatenation is ``text``.

    Examples
    --------
    >>> list(word_bound_segments("The cat."))
    ['The', ' ', 'cat', '.']
    """
    cuts = {0, len(text)}
    cuts.update(match.start() for match in _UNICODE_WORD_BOUNDARY.finditer(text))
    for start, end in pairwise(sorted(cuts)):
        yield text[start:end]


@dataclass(frozen=True)
class UnicodeSegmentScanner(Scanner):
    """Every Unicode word-boundary segment, separators included."""

    def scan(self, text: str) -> Iterator[str]:
        return word_bound_segments(text)


@dataclass(frozen=True)
class UnicodeWordScanner(Scanner):
    """Unicode word-boundary segments containing a letter or number.

    Examples
    --------
    >>> list(UnicodeWordScanner().scan("cheapsite.com costs 1.5 million"))
    ['cheapsite.com', 'costs', '1.5', 'million']
    """

    def scan(self, text: str) -> Iterator[str]:
        for segment in word_bound_segments(text):
            if any(char.isalnum() for char in segment):
                yield segment


@dataclass(frozen=True)
class BoundaryScanner(Scanner):
    """Emits maximal runs of word characters.

    One left-to-right pass tracks whether the previous character was a word
    character; a token is opened on a separator-to-word transition and
    closed on the reverse, so runs of separators never produce tokens.

    Attributes
    ----------
    classifier : WordCharClassifier
        Decides which characters are word characters.

    Examples
    --------
    >>> list(BoundaryScanner().scan("don't-stop"))
    ['don', 't', 'stop']
    >>> list(BoundaryScanner(WordCharClassifier("'-")).scan("don't-stop"))
    ["don't-stop"]
    """

    classifier: WordCharClassifier = field(default_factory=WordCharClassifier)

    def scan(self, text: str) -> Iterator[str]:
        is_word_char = self.classifier.is_word_char
        start = -1
        for i, char in enumerate(text):
            if is_word_char(char):
                if start < 0:
                    start = i
            elif start >= 0:
                yield text[start:i]
                start = -1
        if start >= 0:
            yield text[start:]

    def segments(self, text: str) -> Iterator[Segment]:
        """Yield alternating token and boundary runs covering ``text``.

        Joining the texts of the yielded segments reproduces the input.

        Parameters
        ----------
        text : str
            Input text.

        Yields
        ------
        Segment
            Token and boundary runs in order.

        Examples
        --------
        >>> [s.text for s in BoundaryScanner().segments("a, b")]
        ['a', ', ', 'b']
        """
        is_word_char = self.classifier.is_word_char
        start = 0
        in_word = False
        for i, char in enumerate(text):
            word = is_word_char(char)
            if i > start and word != in_word:
                yield Segment("token" if in_word else "boundary", text[start:i])
                start = i
            in_word = word
        if text:
            yield Segment("token" if in_word else "boundary", text[start:])

    def boundaries(self, text: str) -> list[str]:
        """Return the separator runs of ``text``.

        Parameters
        ----------
        text : str
            Input text.

        Returns
        -------
        list[str]
            Runs of non-word characters, in order.
        """
        return [s.text for s in self.segments(text) if s.kind == "boundary"]
