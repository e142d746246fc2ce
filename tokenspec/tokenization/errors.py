"""Tokenizer construction exceptions."""

from __future__ import annotations


class BuildError(Exception):
    """Base exception for errors raised while building a tokenizer."""

    pass


class InvalidFilterPatternError(BuildError):
    """Exception raised when the token filter pattern fails to compile.

    Parameters
    ----------
    pattern
        The pattern that was rejected.
    reason
        Description of the compilation failure.
    position
        Offset into ``pattern`` where compilation failed. None if unknown.

    Attributes
    ----------
    pattern : str
        The pattern that was rejected.
    reason : str
        Description of the compilation failure.
    position : int | None
        Offset into the pattern where compilation failed.

    Examples
    --------
    >>> try:
    ...     raise InvalidFilterPatternError("[a-", "unterminated set", position=0)
    ... except InvalidFilterPatternError as e:
    ...     print(e.pattern, e.position)
    [a- 0
    """

    def __init__(
        self,
        pattern: str,
        reason: str,
        position: int | None = None,
    ) -> None:
        self.pattern = pattern
        self.reason = reason
        self.position = position
        super().__init__(f"Invalid filter pattern {pattern!r}: {reason}")

    def __str__(self) -> str:
        """Return formatted error message."""
        parts = [super().__str__()]
        if self.position is not None:
            parts.append(f" at position {self.position}")
        return "".join(parts)


class InvalidStrategyParamError(BuildError):
    """Exception raised when a strategy parameter is structurally invalid.

    Parameters
    ----------
    strategy
        Name of the strategy the parameter was given to.
    param
        The rejected parameter. None if the strategy itself is unknown.
    reason
        Description of what is wrong with the parameter.

    Attributes
    ----------
    strategy : str
        Name of the strategy.
    param : str | None
        The rejected parameter.
    reason : str
        Description of the problem.
    """

    def __init__(self, strategy: str, param: str | None, reason: str) -> None:
        self.strategy = strategy
        self.param = param
        self.reason = reason
        super().__init__(f"Invalid parameter for tokenizer {strategy!r}: {reason}")
