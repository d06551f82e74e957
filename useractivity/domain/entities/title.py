"""Helpers for turning stored page titles into display titles."""

from __future__ import annotations

NAMESPACE_NAMES: dict[int, str] = {
    -2: "Media",
    -1: "Special",
    0: "",
    1: "Talk",
    2: "User",
    3: "User talk",
    4: "Project",
    5: "Project talk",
    6: "File",
    7: "File talk",
    8: "MediaWiki",
    9: "MediaWiki talk",
    10: "Template",
    11: "Template talk",
    12: "Help",
    13: "Help talk",
    14: "Category",
    15: "Category talk",
}


def display_title(title: str) -> str:
    """Return ``title`` with underscores shown as spaces."""

    return title.replace("_", " ").strip()


def prefixed_title(namespace: int, title: str) -> str:
    """Return the title including its namespace prefix, e.g. ``User talk:Foo``."""

    text = display_title(title)
    prefix = NAMESPACE_NAMES.get(namespace)
    if prefix is None:
        prefix = f"Namespace {namespace}"
    if not prefix:
        return text
    return f"{prefix}:{text}"


__all__ = ["NAMESPACE_NAMES", "display_title", "prefixed_title"]
