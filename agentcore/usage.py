"""Token and request accounting for model calls."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Iterator

__all__ = [
    "InputTokensDetails",
    "OutputTokensDetails",
    "Usage",
    "usage_context",
    "current_usage",
]


@dataclass
class InputTokensDetails:
    """Breakdown of the input tokens."""

    cached_tokens: int = 0


@dataclass
class OutputTokensDetails:
    """Breakdown of the output tokens."""

    reasoning_tokens: int = 0


@dataclass
class Usage:
    """Totals of requests and tokens across calls to a model API."""

    requests: int = 0
    input_tokens: int = 0
    input_tokens_details: InputTokensDetails = field(default_factory=InputTokensDetails)
    output_tokens: int = 0
    output_tokens_details: OutputTokensDetails = field(default_factory=OutputTokensDetails)
    total_tokens: int = 0

    def add(self, other: Usage) -> None:
        """Add the counts of ``other`` to this usage in place."""
        self.requests += other.requests
        self.input_tokens += other.input_tokens
        self.output_tokens += other.output_tokens
        self.total_tokens += other.total_tokens
        self.input_tokens_details.cached_tokens += other.input_tokens_details.cached_tokens
        self.output_tokens_details.reasoning_tokens += (
            other.output_tokens_details.reasoning_tokens
        )


_current: ContextVar[Usage | None] = ContextVar("agentcore_usage", default=None)


@contextmanager
def usage_context(usage: Usage) -> Iterator[Usage]:
    """Make ``usage`` the current usage for the duration of the block."""
    token = _current.set(usage)
    try:
        yield usage
    finally:
        _current.reset(token)


def current_usage() -> Usage | None:
    """Return the usage set by the innermost active ``usage_context``, if any."""
    return _current.get()