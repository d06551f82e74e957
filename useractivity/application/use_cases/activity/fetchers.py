"""Retrieval of activity from each source.

Every fetcher reads at most ``limit`` rows (newest source id first), drops
rows that are not valid activity or whose actors cannot be resolved, and
collects the normalized items into its own :class:`FetchResult`. Results of
different fetchers are independent and can be merged afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from useractivity.domain.entities import (
    ActivityFilter,
    ActivityGroups,
    ActivityItem,
    Actor,
    ActorScope,
    FilterMode,
    SummaryLine,
)
from useractivity.infrastructure.links import PlainLinkBuilder
from useractivity.infrastructure.text import TextShaper

from .grouping import compose_system_message_line
from .normalizer import (
    is_valid_edit,
    normalize_board_message,
    normalize_comment,
    normalize_edit,
    normalize_relationship,
    normalize_system_message,
)
from .ports import (
    ActorResolver,
    CommentSource,
    EditSource,
    MessageSource,
    RelationshipSource,
    SystemMessageSource,
)

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Items gathered from one or more sources."""

    items: list[ActivityItem] = field(default_factory=list)
    groups: ActivityGroups = field(default_factory=ActivityGroups)
    lines: list[SummaryLine] = field(default_factory=list)

    def add(self, item: ActivityItem, *, grouped: bool = True) -> None:
        self.items.append(item)
        if grouped:
            self.groups.add(item)

    def merge(self, other: FetchResult) -> None:
        self.items.extend(other.items)
        self.groups.merge(other.groups)
        self.lines.extend(other.lines)


def resolve_actor_scope(
    activity_filter: ActivityFilter,
    subject: Actor | None,
    relationships: RelationshipSource,
) -> ActorScope:
    """Translate the filter mode into the set of actors sources may return."""

    if subject is None:
        return ActorScope.unrestricted()
    if activity_filter.mode is FilterMode.SELF:
        return ActorScope.only([subject.id])
    if activity_filter.mode is FilterMode.CIRCLE and activity_filter.relationship_kind is not None:
        related = relationships.related_actor_ids(subject.id, activity_filter.relationship_kind)
        if not related:
            logger.debug("Actor %s has no relationships of kind %s", subject.id, activity_filter.relationship_kind)
        return ActorScope.only(related)
    return ActorScope.unrestricted()


def _skip_unresolved(source: str, row_id: int, actor_id: int) -> None:
    logger.debug("Skipping %s row %s: actor %s does not resolve to a user", source, row_id, actor_id)


def fetch_edits(
    source: EditSource,
    scope: ActorScope,
    limit: int,
    *,
    actors: ActorResolver,
    shaper: TextShaper,
) -> FetchResult:
    result = FetchResult()
    for row in source.list_recent(scope, limit=limit):
        if not is_valid_edit(row):
            logger.debug("Skipping change %s: not a page edit", row.id)
            continue
        actor_name = actors.get_name(row.actor_id)
        if actor_name is None:
            _skip_unresolved("recentchanges", row.id, row.actor_id)
            continue
        result.add(normalize_edit(row, actor_name, shaper))
    return result


def fetch_comments(
    source: CommentSource,
    scope: ActorScope,
    limit: int,
    *,
    actors: ActorResolver,
    shaper: TextShaper,
) -> FetchResult:
    result = FetchResult()
    for row in source.list_recent(scope, limit=limit):
        actor_name = actors.get_name(row.actor_id)
        if actor_name is None:
            _skip_unresolved("Comments", row.id, row.actor_id)
            continue
        result.add(normalize_comment(row, actor_name, shaper))
    return result


def fetch_relationships(
    source: RelationshipSource,
    scope: ActorScope,
    limit: int,
    *,
    actors: ActorResolver,
) -> FetchResult:
    result = FetchResult()
    for row in source.list_recent(scope, limit=limit):
        actor_name = actors.get_name(row.actor_id)
        if actor_name is None:
            _skip_unresolved("user_relationship", row.id, row.actor_id)
            continue
        related_name = actors.get_name(row.related_actor_id)
        if related_name is None:
            _skip_unresolved("user_relationship", row.id, row.related_actor_id)
            continue
        result.add(normalize_relationship(row, actor_name, related_name))
    return result


def fetch_messages_sent(
    source: MessageSource,
    scope: ActorScope,
    limit: int,
    *,
    actors: ActorResolver,
    shaper: TextShaper,
) -> FetchResult:
    result = FetchResult()
    for row in source.list_recent(scope, limit=limit):
        # Renamed or removed users no longer resolve.
        recipient_name = actors.get_name(row.recipient_id)
        if recipient_name is None:
            _skip_unresolved("user_board", row.id, row.recipient_id)
            continue
        sender_name = actors.get_name(row.sender_id)
        if sender_name is None:
            _skip_unresolved("user_board", row.id, row.sender_id)
            continue
        result.add(normalize_board_message(row, sender_name, recipient_name, shaper))
    return result


def fetch_system_messages(
    source: SystemMessageSource,
    scope: ActorScope,
    limit: int,
    *,
    actors: ActorResolver,
    shaper: TextShaper,
    links: PlainLinkBuilder,
) -> FetchResult:
    """System messages are never grouped; each one also yields its own line."""

    result = FetchResult()
    for row in source.list_recent(scope, limit=limit):
        actor_name = actors.get_name(row.actor_id)
        if actor_name is None:
            _skip_unresolved("user_system_messages", row.id, row.actor_id)
            continue
        result.add(normalize_system_message(row, actor_name, shaper), grouped=False)
        result.lines.append(
            compose_system_message_line(row, actor_name, shaper=shaper, links=links)
        )
    return result


__all__ = [
    "FetchResult",
    "fetch_comments",
    "fetch_edits",
    "fetch_messages_sent",
    "fetch_relationships",
    "fetch_system_messages",
    "resolve_actor_scope",
]
