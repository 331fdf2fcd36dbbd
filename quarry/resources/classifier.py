"""
Quarry resources — Root classification.

Decides whether a root location is archive-backed or directory-backed and
derives the base prefix both walkers strip from discovered names.
"""

from __future__ import annotations

from urllib.parse import unquote

from .core import (
    ARCHIVE_SCHEMES,
    FILE_SCHEME,
    RootRecord,
    bare_to_path,
    remove_trailing_slash,
)
from .faults import MalformedLocationFault


def decode_location(location: str) -> str:
    """
    Percent-decode a location. ``+`` is not a space in a path.

    Escapes that are not valid UTF-8 decode to lone surrogates, the same
    form ``os.fsdecode`` gives undecodable filename bytes.
    """
    return unquote(location, errors="surrogateescape")


def is_archive_location(location: str) -> bool:
    """Archive scheme marker on the undecoded location is the sole discriminator."""
    return location.startswith(ARCHIVE_SCHEMES)


def classify(location: str, translated_path: str) -> RootRecord:
    """
    Classify one enumerated root.

    Any scheme other than an archive scheme falls into the directory
    branch; a non-``file:`` location is then walked as a plain path.

    Args:
        location: Location identifier reported by the search-path provider
        translated_path: Slash form of the namespace being scanned

    Returns:
        RootRecord with the decoded location and base prefix

    Raises:
        MalformedLocationFault: If the location is empty or does not end
            with the translated path
    """
    if not location:
        raise MalformedLocationFault(location, "empty location")

    decoded = remove_trailing_slash(decode_location(location))
    if not decoded.endswith(translated_path):
        raise MalformedLocationFault(
            location, f"does not end with '{translated_path}'"
        )

    base = decoded[: len(decoded) - len(translated_path)]
    if base.startswith(FILE_SCHEME):
        base = base[len(FILE_SCHEME):]

    if is_archive_location(location):
        return RootRecord(
            location=location,
            decoded=decoded,
            base=base,
            is_archive=True,
        )

    if decoded.startswith(FILE_SCHEME):
        directory = bare_to_path(decoded[len(FILE_SCHEME):])
    else:
        directory = bare_to_path(decoded)

    return RootRecord(
        location=location,
        decoded=decoded,
        base=base,
        is_archive=False,
        directory=directory,
    )
