"""Text shaping helpers: visual truncation and HTML escaping."""

from __future__ import annotations

import html
import unicodedata

from .localization import LocalizationContext


def visual_length(text: str) -> int:
    """Return the number of rendered characters, ignoring combining marks."""

    return sum(1 for char in text if not unicodedata.combining(char))


class TextShaper:
    """Truncate and escape user supplied text for display."""

    def __init__(self, localization: LocalizationContext) -> None:
        self.localization = localization

    def truncate_visual(self, text: str, max_chars: int) -> str:
        """Shorten ``text`` to at most ``max_chars`` visible characters.

        The localized ellipsis counts towards the budget. Combining marks
        stay attached to the character they modify.
        """

        if visual_length(text) <= max_chars:
            return text

        ellipsis = self.localization.message("ellipsis")
        budget = max_chars - visual_length(ellipsis)
        if budget <= 0:
            return ellipsis

        kept = 0
        end = 0
        for index, char in enumerate(text):
            if not unicodedata.combining(char):
                if kept == budget:
                    break
                kept += 1
            end = index + 1
        return text[:end] + ellipsis

    @staticmethod
    def escape(text: str) -> str:
        return html.escape(text, quote=True)


__all__ = ["TextShaper", "visual_length"]
