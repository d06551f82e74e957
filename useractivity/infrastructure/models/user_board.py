"""SQLAlchemy model for user board messages."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text

from useractivity.infrastructure.database import Base


class UserBoardModel(Base):
    """Message posted by ``sender_id`` on the board of ``recipient_id``."""

    __tablename__ = "user_board"

    id = Column("ub_id", Integer, primary_key=True, index=True)
    recipient_id = Column("ub_actor", Integer, ForeignKey("actor.actor_id"), nullable=False, index=True)
    sender_id = Column("ub_actor_from", Integer, ForeignKey("actor.actor_id"), nullable=False, index=True)
    message_type = Column("ub_type", Integer, nullable=False, default=0)
    message = Column("ub_message", Text, nullable=False, default="")
    created_at = Column("ub_date", DateTime(), nullable=False)


__all__ = ["UserBoardModel"]
