"""Use cases for aggregating the recent activity of a user or of everyone."""

from __future__ import annotations

import logging
from collections.abc import Callable

from sqlalchemy.orm import Session

from useractivity.config import Settings, get_settings
from useractivity.domain.entities import (
    ActivityFilter,
    ActivityGroups,
    ActivityItem,
    ActivityType,
    Actor,
    ActorScope,
    SummaryLine,
)
from useractivity.infrastructure.links import PlainLinkBuilder, build_link_builder
from useractivity.infrastructure.localization import LocalizationContext, NarrativeRenderer
from useractivity.infrastructure.text import TextShaper
from useractivity.utils import now_unix_timestamp

from .feed import assemble_feed, sort_by_timestamp
from .fetchers import (
    FetchResult,
    fetch_comments,
    fetch_edits,
    fetch_messages_sent,
    fetch_relationships,
    fetch_system_messages,
    resolve_actor_scope,
)
from .grouping import GroupSummarizer
from .ports import ActivitySources

SOURCE_EDITS = "edits"
SOURCE_COMMENTS = "comments"
SOURCE_RELATIONSHIPS = "relationships"
SOURCE_SYSTEM_MESSAGES = "system_messages"
SOURCE_MESSAGES_SENT = "messages_sent"

logger = logging.getLogger(__name__)


class UserActivity:
    """One aggregation run over the activity sources.

    Each source is read at most once per instance; the flat feed and the
    grouped feed are both derived from the same fetched rows. ``subject``
    is the user whose feed is built, ``None`` for a site-wide feed.
    """

    def __init__(
        self,
        sources: ActivitySources,
        activity_filter: ActivityFilter,
        *,
        subject: Actor | None = None,
        localization: LocalizationContext | None = None,
        links: PlainLinkBuilder | None = None,
        now: int | None = None,
    ) -> None:
        self.sources = sources
        self.filter = activity_filter
        self.subject = subject
        self.localization = localization or LocalizationContext()
        self.links = links or PlainLinkBuilder()
        self.now = now if now is not None else now_unix_timestamp()
        self.shaper = TextShaper(self.localization)
        self.summarizer = GroupSummarizer(
            NarrativeRenderer(self.localization), self.shaper, self.links
        )
        self._scope: ActorScope | None = None
        self._results: dict[str, FetchResult] = {}

    @property
    def scope(self) -> ActorScope:
        if self._scope is None:
            self._scope = resolve_actor_scope(
                self.filter, self.subject, self.sources.relationships
            )
        return self._scope

    def get_edits(self) -> list[ActivityItem]:
        return list(self._fetch(SOURCE_EDITS).items)

    def get_comments(self) -> list[ActivityItem]:
        return list(self._fetch(SOURCE_COMMENTS).items)

    def get_relationships(self) -> list[ActivityItem]:
        return list(self._fetch(SOURCE_RELATIONSHIPS).items)

    def get_system_messages(self) -> list[ActivityItem]:
        return list(self._fetch(SOURCE_SYSTEM_MESSAGES).items)

    def get_messages_sent(self) -> list[ActivityItem]:
        return list(self._fetch(SOURCE_MESSAGES_SENT).items)

    def get_activity_list(self) -> list[ActivityItem]:
        """Return the items of every enabled source, newest first."""

        return assemble_feed(result.items for result in self._enabled_results())

    def get_activity_list_grouped(self) -> list[SummaryLine]:
        """Return summary lines for the enabled categories, newest first.

        Only groups touched during the last three days are summarized, while
        system messages produce one line each.
        """

        combined = FetchResult()
        for result in self._enabled_results():
            combined.merge(result)

        lines = list(combined.lines) if self.filter.show_system_messages else []
        lines.extend(self.summarize(combined.groups))
        return sort_by_timestamp(lines)

    def summarize(self, groups: ActivityGroups) -> list[SummaryLine]:
        return self.summarizer.summarize(groups, self._grouped_categories(), now=self.now)

    def _grouped_categories(self) -> list[ActivityType]:
        categories: list[ActivityType] = []
        if self.filter.show_edits:
            categories.append(ActivityType.EDIT)
        if self.filter.show_comments:
            categories.append(ActivityType.COMMENT)
        if self.filter.show_relationships:
            categories.extend([ActivityType.FRIEND, ActivityType.FOE])
        if self.filter.show_messages_sent:
            categories.append(ActivityType.USER_MESSAGE)
        return categories

    def _enabled_results(self) -> list[FetchResult]:
        enabled = [
            (self.filter.show_edits, SOURCE_EDITS),
            (self.filter.show_comments, SOURCE_COMMENTS),
            (self.filter.show_relationships, SOURCE_RELATIONSHIPS),
            (self.filter.show_system_messages, SOURCE_SYSTEM_MESSAGES),
            (self.filter.show_messages_sent, SOURCE_MESSAGES_SENT),
        ]
        return [self._fetch(name) for is_enabled, name in enabled if is_enabled]

    def _fetch(self, name: str) -> FetchResult:
        if name not in self._results:
            fetcher = self._fetchers()[name]
            self._results[name] = fetcher()
            logger.debug(
                "Fetched %s %s items (limit %s)",
                len(self._results[name].items),
                name,
                self.filter.item_max,
            )
        return self._results[name]

    def _fetchers(self) -> dict[str, Callable[[], FetchResult]]:
        sources = self.sources
        limit = self.filter.item_max
        return {
            SOURCE_EDITS: lambda: fetch_edits(
                sources.edits, self.scope, limit, actors=sources.actors, shaper=self.shaper
            ),
            SOURCE_COMMENTS: lambda: fetch_comments(
                sources.comments, self.scope, limit, actors=sources.actors, shaper=self.shaper
            ),
            SOURCE_RELATIONSHIPS: lambda: fetch_relationships(
                sources.relationships, self.scope, limit, actors=sources.actors
            ),
            SOURCE_SYSTEM_MESSAGES: lambda: fetch_system_messages(
                sources.system_messages,
                self.scope,
                limit,
                actors=sources.actors,
                shaper=self.shaper,
                links=self.links,
            ),
            SOURCE_MESSAGES_SENT: lambda: fetch_messages_sent(
                sources.messages, self.scope, limit, actors=sources.actors, shaper=self.shaper
            ),
        }


def build_user_activity(
    session: Session,
    *,
    activity_filter: ActivityFilter,
    subject_name: str | None = None,
    settings: Settings | None = None,
    now: int | None = None,
) -> UserActivity:
    """Return a database backed :class:`UserActivity` run.

    Raises ``ValueError`` when ``subject_name`` does not match any user.
    """

    settings = settings or get_settings()
    sources = ActivitySources.from_session(session)

    subject: Actor | None = None
    if subject_name is not None:
        from useractivity.infrastructure.repositories import ActorRepository

        subject = ActorRepository(session).get_by_name(subject_name)
        if subject is None:
            raise ValueError(f"User '{subject_name}' not found")

    return UserActivity(
        sources,
        activity_filter,
        subject=subject,
        localization=LocalizationContext.for_language(settings.activity_language),
        links=build_link_builder(settings),
        now=now,
    )


__all__ = ["UserActivity", "build_user_activity"]
