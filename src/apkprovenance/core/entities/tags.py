"""Comma-separated tag lists.

Categories, anti-features, requirements, permissions and features are all
stored as short text tokens joined by commas. In memory they are an ordered
list with duplicates removed, or ``None`` when there are no tags at all.
An empty list is never kept: it collapses to ``None`` so that an absent
cell and an empty cell mean the same thing.
"""

from __future__ import annotations

from collections.abc import Iterable

SEPARATOR = ","


def make_tags(items: Iterable[str] | None) -> list[str] | None:
    """Normalise a sequence of tags.

    Whitespace is stripped, blank items are dropped and duplicates are
    removed keeping the first occurrence.

    Returns:
        The ordered tag list, or None when no tags remain.
    """
    if items is None:
        return None
    tags = list(dict.fromkeys(t.strip() for t in items if t and t.strip()))
    return tags or None


def parse_tags(text: str | None) -> list[str] | None:
    """Parse comma-separated text into an ordered tag list (or None)."""
    if not text:
        return None
    return make_tags(text.split(SEPARATOR))


def join_tags(tags: Iterable[str] | None) -> str | None:
    """Join tags back into comma-separated text.

    None and empty input give None, which persists as an absent cell.
    """
    if tags is None:
        return None
    text = SEPARATOR.join(tags)
    return text or None
