"""Responsive complexity scoring package.

Decomposes the complexity score into one module per weighted
category.  The public API is :func:`calculate_complexity`.
"""

from __future__ import annotations

from mediascope.analysis.complexity.calculator import calculate_complexity

__all__ = ["calculate_complexity"]
