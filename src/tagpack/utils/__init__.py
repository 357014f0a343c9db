"""Utility functions for tagpack.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size

__all__ = [
    "encoded_size",
]
