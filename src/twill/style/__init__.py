"""
Style composition: the ``Style`` aggregate and its merge operations.
"""

from twill.style.style import ColorLike, Style, merge, merge_all

__all__ = ["ColorLike", "Style", "merge", "merge_all"]
