"""Quarry CLI utilities."""

from .colors import dim, error, kv, section, tree_item

__all__ = [
    "dim",
    "error",
    "kv",
    "section",
    "tree_item",
]
