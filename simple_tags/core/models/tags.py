"""Tag normalization shared by record writes and query inputs."""

from __future__ import annotations

from collections.abc import Iterable

from simple_tags.config import settings

TagInput = str | Iterable[str] | None


def normalize_tags(value: TagInput, *, delimiter: str | None = None) -> list[str]:
    """Return the canonical tag sequence for ``value``.

    Strings are split on the delimiter; every token is stripped and empty tokens
    are dropped. Order is preserved and duplicates are kept as given.
    """
    if value is None:
        return []

    if isinstance(value, str):
        tokens: Iterable[object] = value.split(delimiter or settings.tag_delimiter)
    elif isinstance(value, Iterable):
        tokens = value
    else:
        raise TypeError(f"Tags must be a string or a sequence of strings, got {type(value).__name__}")

    normalized: list[str] = []
    for token in tokens:
        if token is None:
            continue
        tag = str(token).strip()
        if tag:
            normalized.append(tag)
    return normalized


def join_tags(tags: Iterable[str], *, separator: str | None = None) -> str:
    """Render tags as the delimited string view."""
    sep = settings.tag_separator if separator is None else separator
    return sep.join(tags)
