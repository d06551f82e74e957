"""Persistence helpers resolving actor ids to display names."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from useractivity.domain.entities import Actor
from useractivity.infrastructure.models import ActorModel


class ActorRepository:
    """Look up actors, caching display names for the lifetime of the instance."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self._names: dict[int, str | None] = {}

    def get_by_name(self, name: str) -> Actor | None:
        model = (
            self.session.query(ActorModel)
            .filter(ActorModel.name == name.replace("_", " ").strip())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_name(self, actor_id: int) -> str | None:
        """Return the display name of ``actor_id`` or ``None`` when it is unknown."""

        if actor_id not in self._names:
            self.get_map_by_ids([actor_id])
        return self._names.get(actor_id)

    def get_map_by_ids(self, actor_ids: Sequence[int]) -> dict[int, Actor]:
        if not actor_ids:
            return {}

        unique_ids = {int(actor_id) for actor_id in actor_ids}
        query = self.session.query(ActorModel).filter(ActorModel.id.in_(unique_ids))
        actors = {model.id: self._to_entity(model) for model in query.all()}
        for actor_id in unique_ids:
            actor = actors.get(actor_id)
            self._names[actor_id] = actor.name if actor else None
        return actors

    @staticmethod
    def _to_entity(model: ActorModel) -> Actor:
        return Actor(id=model.id, name=model.name)


__all__ = ["ActorRepository"]
