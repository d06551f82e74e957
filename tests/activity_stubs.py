"""In-memory activity sources shared by the activity use case tests."""

from __future__ import annotations

from useractivity.application.use_cases.activity import ActivitySources
from useractivity.domain.entities import ActorScope

NOW = 1_700_000_000
HOUR = 60 * 60
DAY = 24 * HOUR


class StubActors:
    def __init__(self, names: dict[int, str]) -> None:
        self.names = dict(names)
        self.lookups: list[int] = []

    def get_name(self, actor_id: int) -> str | None:
        self.lookups.append(actor_id)
        return self.names.get(actor_id)


class StubSource:
    """Return stored rows the way the database repositories do."""

    def __init__(self, rows=(), *, actor_attribute: str = "actor_id") -> None:
        self.rows = list(rows)
        self.actor_attribute = actor_attribute
        self.calls: list[tuple[ActorScope, int]] = []

    def list_recent(self, scope: ActorScope, *, limit: int):
        self.calls.append((scope, limit))
        rows = [row for row in self.rows if scope.allows(getattr(row, self.actor_attribute))]
        rows.sort(key=lambda row: row.id, reverse=True)
        return rows[:limit]


class StubRelationships(StubSource):
    def related_actor_ids(self, actor_id: int, kind: int) -> set[int]:
        return {
            row.related_actor_id
            for row in self.rows
            if row.actor_id == actor_id and row.kind == kind
        }


def make_sources(
    *,
    names: dict[int, str],
    edits=(),
    comments=(),
    relationships=(),
    messages=(),
    system_messages=(),
) -> ActivitySources:
    return ActivitySources(
        actors=StubActors(names),
        edits=StubSource(edits),
        comments=StubSource(comments),
        relationships=StubRelationships(relationships),
        messages=StubSource(messages, actor_attribute="sender_id"),
        system_messages=StubSource(system_messages),
    )
