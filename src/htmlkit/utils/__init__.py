#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/utils/__init__.py
"""Utility helpers for htmlkit."""

from htmlkit.utils.escape import escape_html

__all__ = ["escape_html"]
