# src/llm/errors.py - v1
"""Completion failures surfaced per document. None of them are retried."""

from __future__ import annotations


class CompletionError(Exception):
    """A completion request failed."""


class AuthError(CompletionError):
    """Credentials were rejected by the completion service."""


class RateLimitError(CompletionError):
    """The completion service throttled the request."""


class NetworkError(CompletionError):
    """Transport-level failure reaching the completion service."""
