"""SQLAlchemy model for the actor table."""

from sqlalchemy import Column, Integer, String

from useractivity.infrastructure.database import Base


class ActorModel(Base):
    """Maps actor ids used by the activity tables to display names."""

    __tablename__ = "actor"

    id = Column("actor_id", Integer, primary_key=True, index=True)
    user_id = Column("actor_user", Integer, nullable=True, unique=True)
    name = Column("actor_name", String(255), nullable=False, unique=True)


__all__ = ["ActorModel"]
