"""Blank-string checks used by argument preconditions."""

from __future__ import annotations


def is_blank(text: str | None) -> bool:
    """Return True for ``None``, ``""``, or whitespace-only text."""
    return text is None or not text.strip()


def is_not_blank(text: str | None) -> bool:
    return not is_blank(text)
