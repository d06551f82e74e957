"""Message catalogs and the narrative renderer for activity summaries.

Messages use numbered ``$n`` parameters plus two magic words:
``{{PLURAL:$n|one|other}}`` and ``{{GENDER:$n|male|female|unknown}}``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Final

DEFAULT_LANGUAGE: Final[str] = "en"

GENDER_MALE = "male"
GENDER_FEMALE = "female"
GENDER_UNKNOWN = "unknown"

logger = logging.getLogger(__name__)

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "and": "and",
        "comma-separator": ", ",
        "word-separator": " ",
        "parentheses": "($1)",
        "ellipsis": "...",
        "useractivity-edit": "$1 {{PLURAL:$4|edited the page|edited the following pages:}} $3",
        "useractivity-comment": "$1 {{PLURAL:$4|commented on the page|commented on the following pages:}} $3",
        "useractivity-friend": "$1 {{PLURAL:$2|is now friends with|are now friends with}} $3",
        "useractivity-foe": "$1 {{PLURAL:$2|is now foes with|are now foes with}} $3",
        "useractivity-user_message": "$1 {{PLURAL:$4|sent a message to|sent messages to}} $3",
        "useractivity-group-edit": "{{PLURAL:$1|one edit|$1 edits}}",
        "useractivity-group-comment": "{{PLURAL:$1|one comment|$1 comments}}",
        "useractivity-group-user_message": "{{PLURAL:$1|one message|$1 messages}}",
        "useractivity-group-friend": "{{PLURAL:$1|one friend|$1 friends}}",
        "useractivity-group-foe": "{{PLURAL:$1|one foe|$1 foes}}",
    },
    "es": {
        "and": "y",
        "comma-separator": ", ",
        "word-separator": " ",
        "parentheses": "($1)",
        "ellipsis": "...",
        "useractivity-edit": "$1 {{PLURAL:$2|editó|editaron}} {{PLURAL:$4|la página|las siguientes páginas:}} $3",
        "useractivity-comment": "$1 {{PLURAL:$2|comentó|comentaron}} {{PLURAL:$4|en la página|en las siguientes páginas:}} $3",
        "useractivity-friend": "$1 {{PLURAL:$2|ahora es {{GENDER:$5|amigo|amiga|amigo}} de|ahora son amigos de}} $3",
        "useractivity-foe": "$1 {{PLURAL:$2|ahora es {{GENDER:$5|enemigo|enemiga|enemigo}} de|ahora son enemigos de}} $3",
        "useractivity-user_message": "$1 {{PLURAL:$2|envió|enviaron}} {{PLURAL:$4|un mensaje a|mensajes a}} $3",
        "useractivity-group-edit": "{{PLURAL:$1|una edición|$1 ediciones}}",
        "useractivity-group-comment": "{{PLURAL:$1|un comentario|$1 comentarios}}",
        "useractivity-group-user_message": "{{PLURAL:$1|un mensaje|$1 mensajes}}",
        "useractivity-group-friend": "{{PLURAL:$1|un amigo|$1 amigos}}",
        "useractivity-group-foe": "{{PLURAL:$1|un enemigo|$1 enemigos}}",
    },
}

_PARAMETER = re.compile(r"\$(\d+)")
# Innermost magic word first so nested PLURAL/GENDER blocks resolve inside out.
_MAGIC_WORD = re.compile(r"\{\{(PLURAL|GENDER):\s*\$(\d+)\s*\|([^{}]*)\}\}")


def _default_gender(_: str) -> str:
    return GENDER_UNKNOWN


@dataclass(frozen=True)
class LocalizationContext:
    """Language, message catalog and gender lookup used to format messages."""

    language: str = DEFAULT_LANGUAGE
    messages: Mapping[str, str] = field(default_factory=lambda: MESSAGES[DEFAULT_LANGUAGE])
    gender_of: Callable[[str], str] = _default_gender

    @classmethod
    def for_language(
        cls, language: str, *, gender_of: Callable[[str], str] | None = None
    ) -> LocalizationContext:
        """Return a context for ``language``, falling back to English."""

        code = (language or "").strip().lower()
        if code not in MESSAGES:
            logger.debug("No activity messages for language '%s', using English", language)
            code = DEFAULT_LANGUAGE
        return cls(
            language=code,
            messages=MESSAGES[code],
            gender_of=gender_of or _default_gender,
        )

    def message(self, key: str, *params: object) -> str:
        """Return message ``key`` with ``params`` substituted."""

        template = self.messages.get(key)
        if template is None:
            template = MESSAGES[DEFAULT_LANGUAGE].get(key)
        if template is None:
            logger.warning("Missing activity message '%s'", key)
            return f"<{key}>"
        return self._format(template, params)

    def plural(self, count: int, forms: list[str]) -> str:
        if not forms:
            return ""
        if count == 1 or len(forms) == 1:
            return forms[0]
        return forms[1]

    def gender(self, user_name: str, forms: list[str]) -> str:
        if not forms:
            return ""
        gender = self.gender_of(user_name) if user_name else GENDER_UNKNOWN
        index = {GENDER_MALE: 0, GENDER_FEMALE: 1}.get(gender, 2)
        return forms[min(index, len(forms) - 1)]

    def _format(self, template: str, params: tuple[object, ...]) -> str:
        def parameter(index: int) -> object:
            if 1 <= index <= len(params):
                return params[index - 1]
            return None

        def magic_word(match: re.Match[str]) -> str:
            word, index, raw_forms = match.group(1), int(match.group(2)), match.group(3)
            forms = [form.strip() for form in raw_forms.split("|")]
            value = parameter(index)
            if word == "PLURAL":
                try:
                    count = int(value)  # type: ignore[arg-type]
                except (TypeError, ValueError):
                    count = 0
                return self.plural(count, forms)
            return self.gender(str(value or ""), forms)

        text = template
        while True:
            expanded = _MAGIC_WORD.sub(magic_word, text)
            if expanded == text:
                break
            text = expanded

        def substitute(match: re.Match[str]) -> str:
            value = parameter(int(match.group(1)))
            return match.group(0) if value is None else str(value)

        return _PARAMETER.sub(substitute, text)


class NarrativeRenderer:
    """Compose the localized sentence for one group of activity."""

    def __init__(self, localization: LocalizationContext) -> None:
        self.localization = localization

    def render(
        self,
        category: str,
        actors: str,
        actor_count: int,
        pages: str,
        page_count: int,
        gender_subject: str = "",
    ) -> str:
        return self.localization.message(
            f"useractivity-{category}",
            actors,
            actor_count,
            pages,
            page_count,
            gender_subject,
        ).strip()

    def render_group_count(self, category: str, count: int, actor_name: str) -> str:
        """Return the parenthesized action count shown next to a target."""

        label = self.localization.message(f"useractivity-group-{category}", count, actor_name)
        return self.localization.message("parentheses", label)

    def separator(self, name: str) -> str:
        return self.localization.message(name)


__all__ = [
    "DEFAULT_LANGUAGE",
    "GENDER_FEMALE",
    "GENDER_MALE",
    "GENDER_UNKNOWN",
    "LocalizationContext",
    "MESSAGES",
    "NarrativeRenderer",
]
