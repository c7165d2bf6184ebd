"""Shared serialization helpers for camelCase conversion.

Provides the single ``snake_to_camel`` implementation used by the
Pydantic model configs, so persisted reports use the same camelCase
keys as the browser-side tooling (``totalMediaQueries``,
``problemBreakpoints``, ...).
"""

from __future__ import annotations

import pydantic


def snake_to_camel(name: str) -> str:
    """Convert a snake_case string to camelCase.

    Args:
        name: A snake_case identifier such as
            ``"total_media_queries"``.

    Returns:
        The camelCase equivalent, e.g. ``"totalMediaQueries"``.
    """
    parts = name.split("_")
    return parts[0] + "".join(w.capitalize() for w in parts[1:])


CAMEL_CONFIG = pydantic.ConfigDict(
    alias_generator=snake_to_camel, populate_by_name=True
)
