"""
Quarry CLI — UI toolkit.

Styled output primitives built on Click:

    error(), dim()
    section()   — section divider with title
    kv()        — key-value pair, aligned
    tree_item() — indented tree node

All output degrades gracefully on non-colour terminals (click.style
handles NO_COLOR / TERM=dumb).
"""

from __future__ import annotations

import shutil
from typing import Optional

import click

_TERM_WIDTH: Optional[int] = None


def _tw() -> int:
    """Terminal width, cached and clamped to a sane range."""
    global _TERM_WIDTH
    if _TERM_WIDTH is None:
        _TERM_WIDTH = max(40, min(shutil.get_terminal_size((80, 24)).columns, 120))
    return _TERM_WIDTH


def error(message: str) -> None:
    """Print error message in red to stderr."""
    click.echo(click.style(message, fg="red"), err=True)


def dim(message: str) -> None:
    """Print dimmed message."""
    click.echo(click.style(message, dim=True))


_L_H  = "\u2500"   # ─
_L_BL = "\u2514"   # └
_L_LT = "\u251c"   # ├
_CROSS = "\u2717"  # ✗


def section(title: str, *, width: Optional[int] = None, fg: str = "cyan") -> None:
    """
    Print a section header with a ruled line.

        ── Roots ─────────────────────────────────
    """
    w = width or _tw()
    dashes = max(4, w - len(title) - 6)
    line = f"{_L_H}{_L_H} {title} {_L_H * dashes}"
    click.echo(click.style(line, fg=fg, bold=True))


def kv(
    key: str,
    value: str,
    *,
    key_width: int = 14,
    indent: int = 2,
    key_fg: str = "white",
    val_fg: str = "cyan",
) -> None:
    """
    Print an aligned key-value pair.

        Namespace:    io.github.mighten
        Roots:        2
    """
    prefix = " " * indent
    k = click.style(f"{key}:", fg=key_fg)
    v = click.style(str(value), fg=val_fg)
    padding = " " * max(1, key_width - len(key) - 1)
    click.echo(f"{prefix}{k}{padding}{v}")


def tree_item(text: str, *, last: bool = False, depth: int = 0, fg: str = "white") -> None:
    """
    Print an indented tree node.

        ├── file:/srv/classes/
        └── jar:file:/srv/lib/app.jar!/
    """
    indent_str = "    " * depth
    connector = f"{_L_BL}{_L_H}{_L_H} " if last else f"{_L_LT}{_L_H}{_L_H} "
    click.echo(
        click.style(indent_str, dim=True)
        + click.style(connector, dim=True)
        + click.style(text, fg=fg)
    )
