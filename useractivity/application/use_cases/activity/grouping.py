"""Condensing grouped activity into summary lines.

Groups are processed per category. Within a category every target is
described at most once; targets that only have a single actor are stacked
onto the line of another target with the same actor, so "Bob edited A",
"Bob edited B" becomes "Bob edited the following pages: A, B".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from useractivity.domain.entities import (
    ActivityGroups,
    ActivityType,
    GroupKey,
    SummaryLine,
    SystemMessageRow,
    TargetGroup,
)
from useractivity.infrastructure.links import PlainLinkBuilder
from useractivity.infrastructure.localization import NarrativeRenderer
from useractivity.infrastructure.text import TextShaper

from .feed import sort_by_timestamp
from .normalizer import is_levelup

RECENT_WINDOW_SECONDS = 3 * 24 * 60 * 60
STACK_LIMIT = 5
ACTOR_LABEL_LENGTH = 15

GROUPED_CATEGORIES: tuple[ActivityType, ...] = (
    ActivityType.EDIT,
    ActivityType.COMMENT,
    ActivityType.FRIEND,
    ActivityType.FOE,
    ActivityType.USER_MESSAGE,
)

logger = logging.getLogger(__name__)


class GroupSummarizer:
    """Turn an :class:`ActivityGroups` map into :class:`SummaryLine` objects."""

    def __init__(
        self,
        renderer: NarrativeRenderer,
        shaper: TextShaper,
        links: PlainLinkBuilder | None = None,
    ) -> None:
        self.renderer = renderer
        self.shaper = shaper
        self.links = links or PlainLinkBuilder()

    def summarize(
        self,
        groups: ActivityGroups,
        categories: Iterable[ActivityType],
        *,
        now: int,
    ) -> list[SummaryLine]:
        """Summarize every category, newest line first."""

        cutoff = now - RECENT_WINDOW_SECONDS
        lines: list[SummaryLine] = []
        for activity_type in categories:
            displayed: set[GroupKey] = set()
            lines.extend(
                self.summarize_category(
                    groups, activity_type, displayed=displayed, cutoff=cutoff
                )
            )
        return sort_by_timestamp(lines)

    def summarize_category(
        self,
        groups: ActivityGroups,
        activity_type: ActivityType,
        *,
        displayed: set[GroupKey],
        cutoff: int,
        has_page: bool = True,
    ) -> list[SummaryLine]:
        """Summarize the groups of one category.

        ``displayed`` collects the keys already described and is updated in
        place. Groups last touched before ``cutoff`` are ignored entirely,
        including as stacking candidates. With ``has_page`` false the
        target of a group is only mentioned through stacking and lines are
        emitted even without any target.
        """

        candidates = [
            (key, group)
            for key, group in groups.for_type(activity_type)
            if group.last_timestamp >= cutoff
        ]
        lines: list[SummaryLine] = []

        for key, group in candidates:
            targets: list[str] = []
            sole_actor = group.sole_actor

            if has_page and key not in displayed:
                displayed.add(key)
                targets.append(self._target_fragment(key, group, sole_actor))

            if sole_actor is not None:
                for other_key, other in candidates:
                    if len(targets) >= STACK_LIMIT:
                        break
                    if other_key in displayed or other.sole_actor != sole_actor:
                        continue
                    displayed.add(other_key)
                    targets.append(self._target_fragment(other_key, other, sole_actor))

            if not targets and has_page:
                continue

            text = self.renderer.render(
                activity_type.value,
                self._actor_fragment(group),
                group.actor_count,
                self.renderer.separator("comma-separator").join(targets),
                len(targets),
                sole_actor or "",
            )
            lines.append(SummaryLine(activity_type, group.last_timestamp, text))

        logger.debug(
            "Summarized %s %s groups into %s lines", len(candidates), activity_type.value, len(lines)
        )
        return lines

    def _target_fragment(
        self, key: GroupKey, group: TargetGroup, sole_actor: str | None
    ) -> str:
        if key.type.is_page_scoped:
            fragment = self.links.page(key.target)
        else:
            fragment = self.links.user(key.target)

        if sole_actor is not None:
            action_count = len(group.actions_by_actor[sole_actor])
            if action_count > 1:
                fragment += self.renderer.separator("word-separator")
                fragment += self.renderer.render_group_count(
                    key.type.value, action_count, sole_actor
                )
        return fragment

    def _actor_fragment(self, group: TargetGroup) -> str:
        count = group.actor_count
        comma = self.renderer.separator("comma-separator")
        space = self.renderer.separator("word-separator")
        conjunction = self.renderer.separator("and")

        actors = ""
        for index, name in enumerate(group.actions_by_actor, start=1):
            if actors and count > 2:
                actors += comma
            if index == count and count > 1:
                if not actors.endswith(space):
                    actors += space
                actors += conjunction + space
            label = self.shaper.truncate_visual(name, ACTOR_LABEL_LENGTH)
            actors += self.links.actor(name, label)
        return actors


def compose_system_message_line(
    row: SystemMessageRow,
    actor_name: str,
    *,
    shaper: TextShaper,
    links: PlainLinkBuilder,
) -> SummaryLine:
    """Return the ungrouped line announcing one system message.

    Level-up messages carry trusted markup and are used as stored; any
    other message is escaped.
    """

    label = shaper.truncate_visual(actor_name, ACTOR_LABEL_LENGTH)
    message = row.message if is_levelup(row) else shaper.escape(row.message)
    return SummaryLine(
        ActivityType.SYSTEM_MESSAGE,
        row.timestamp,
        f"{links.actor(actor_name, label)} {message}".strip(),
    )


__all__ = [
    "ACTOR_LABEL_LENGTH",
    "GROUPED_CATEGORIES",
    "GroupSummarizer",
    "RECENT_WINDOW_SECONDS",
    "STACK_LIMIT",
    "compose_system_message_line",
]
