"""Word character classification for the boundary scanner."""

from __future__ import annotations

from collections.abc import Iterable

import regex

# the Unicode \w class: alphabetic characters, marks, decimal digits,
# connector punctuation (which includes "_") and the join controls
_WORD_CHAR = regex.compile(r"[\p{Alphabetic}\p{M}\p{Nd}\p{Pc}\p{Join_Control}]")


def is_default_word_char(char: str) -> bool:
    """Return whether ``char`` belongs to the default word class.

    Parameters
    ----------
    char : str
        A single character.

    Returns
    -------
    bool
        True for alphabetic characters (letters, letter numbers such as
        "Ⅷ" and alphabetic symbols such as "Ⓐ"), marks, decimal digits,
        connector punctuation and the zero-width joiners; False otherwise.

    Examples
    --------
    >>> is_default_word_char("é")
    True
    >>> is_default_word_char("_")
    True
    >>> is_default_word_char("-")
    False
    """
    return _WORD_CHAR.match(char) is not None


class WordCharClassifier:
    """Classifies characters as word characters or separators.

    The default word class can be widened with an override set: every
    character in it is treated as word-internal regardless of its properties.

    Parameters
    ----------
    overrides : Iterable[str]
        Characters to reclassify as word characters.

    Examples
    --------
    >>> classifier = WordCharClassifier("'-")
    >>> classifier.is_word_char("-")
    True
    >>> WordCharClassifier().is_word_char("-")
    False
    """

    __slots__ = ("_overrides",)

    def __init__(self, overrides: Iterable[str] = ()) -> None:
        self._overrides = frozenset(overrides)

    @property
    def overrides(self) -> frozenset[str]:
        """Characters reclassified as word characters."""
        return self._overrides

    def is_word_char(self, char: str) -> bool:
        """Return whether ``char`` is part of a word.

        Parameters
        ----------
        char : str
            A single character.

        Returns
        -------
        bool
            True if the character is a word character.
        """
        return char in self._overrides or is_default_word_char(char)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordCharClassifier):
            return NotImplemented
        return self._overrides == other._overrides

    def __hash__(self) -> int:
        return hash(self._overrides)

    def __repr__(self) -> str:
        return f"WordCharClassifier({''.join(sorted(self._overrides))!r})"
