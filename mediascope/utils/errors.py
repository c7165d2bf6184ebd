"""
Error types and helpers for consistent error message extraction.
"""

from __future__ import annotations


class MediascopeError(Exception):
    """Base class for errors surfaced to the command line."""


class InvalidUrlError(MediascopeError):
    """The target URL is not an absolute http(s) URL."""


class NavigationError(MediascopeError):
    """The page could not be loaded (unreachable, timeout, HTTP error)."""


def get_error_message(error: BaseException | object) -> str:
    """
    Safely extract an error message from an unknown error type.
    """
    if isinstance(error, Exception):
        return str(error) or error.__class__.__name__
    return "Unknown error"
