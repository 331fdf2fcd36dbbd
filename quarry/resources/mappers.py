"""
Quarry resources — Stock mappers.

Ready-made mapper factories for the common discovery jobs. Each returns a
callable suitable for ``ResourceResolver.scan``; names the mapper is not
interested in map to None and are dropped.
"""

from __future__ import annotations

from typing import Callable, Optional

from .core import ResourceRecord


def class_name_mapper(*suffixes: str) -> Callable[[ResourceRecord], Optional[str]]:
    """
    Map ``io/github/Foo.class`` to ``io.github.Foo``.

    With several suffixes the first one the name ends with is stripped;
    ``.class`` is used when none are given.

    Backslashes are treated as separators too, so names produced by a
    foreign tool still map cleanly.
    """
    suffixes = suffixes or (".class",)

    def mapper(record: ResourceRecord) -> Optional[str]:
        name = record.name
        for suffix in suffixes:
            if name.endswith(suffix):
                return name[: len(name) - len(suffix)].replace("/", ".").replace("\\", ".")
        return None

    return mapper


def module_name_mapper() -> Callable[[ResourceRecord], Optional[str]]:
    """Map ``pkg/mod.py`` to ``pkg.mod`` and ``pkg/__init__.py`` to ``pkg``."""
    to_dotted = class_name_mapper(".py")

    def mapper(record: ResourceRecord) -> Optional[str]:
        dotted = to_dotted(record)
        if dotted is None:
            return None
        if dotted == "__init__":
            return None
        if dotted.endswith(".__init__"):
            return dotted[: -len(".__init__")]
        return dotted

    return mapper


def suffix_filter(*suffixes: str) -> Callable[[ResourceRecord], Optional[ResourceRecord]]:
    """Keep records whose name ends with one of ``suffixes`` (all when empty)."""
    def mapper(record: ResourceRecord) -> Optional[ResourceRecord]:
        if not suffixes or record.name.endswith(suffixes):
            return record
        return None

    return mapper
