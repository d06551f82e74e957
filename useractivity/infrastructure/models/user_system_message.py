"""SQLAlchemy model for system messages such as level-up notices."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text

from useractivity.infrastructure.database import Base


class UserSystemMessageModel(Base):
    """Notice addressed to a single actor."""

    __tablename__ = "user_system_messages"

    id = Column("um_id", Integer, primary_key=True, index=True)
    actor_id = Column("um_actor", Integer, ForeignKey("actor.actor_id"), nullable=False, index=True)
    message_type = Column("um_type", Integer, nullable=False, default=0)
    message = Column("um_message", Text, nullable=False, default="")
    created_at = Column("um_date", DateTime(), nullable=False)


__all__ = ["UserSystemMessageModel"]
