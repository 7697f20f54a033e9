"""Exception types raised by the MOG engine."""

from __future__ import annotations


class MogError(ValueError):
    """Base class for recoverable engine errors."""


class InvalidPattern(MogError):
    """Input outside the defined domain (pattern, symbol, point or vector)."""


class CompletionError(MogError):
    """The given points do not determine a unique completion."""


class NoCompletion(CompletionError):
    """The given points do not extend to any octad."""


class AmbiguousInput(CompletionError):
    """Too few points to determine a unique completion."""


class UnknownGenerator(MogError):
    """No generator is registered under the requested name."""


__all__ = [
    "MogError",
    "InvalidPattern",
    "CompletionError",
    "NoCompletion",
    "AmbiguousInput",
    "UnknownGenerator",
]
