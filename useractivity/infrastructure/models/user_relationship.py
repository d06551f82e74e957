"""SQLAlchemy model for friend and foe relationships."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer

from useractivity.infrastructure.database import Base


class UserRelationshipModel(Base):
    """Relationship from ``actor_id`` towards ``related_actor_id``."""

    __tablename__ = "user_relationship"

    id = Column("r_id", Integer, primary_key=True, index=True)
    actor_id = Column("r_actor", Integer, ForeignKey("actor.actor_id"), nullable=False, index=True)
    related_actor_id = Column(
        "r_actor_relation", Integer, ForeignKey("actor.actor_id"), nullable=False, index=True
    )
    kind = Column("r_type", Integer, nullable=False)
    created_at = Column("r_date", DateTime(), nullable=False)


__all__ = ["UserRelationshipModel"]
