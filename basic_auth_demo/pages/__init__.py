"""
Static demo page served at "/".
"""

from .index import render_index

__all__ = ["render_index"]
