"""SQLAlchemy model for the recent changes log."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from useractivity.infrastructure.database import Base


class RecentChangeModel(Base):
    """One page edit, page creation or log entry."""

    __tablename__ = "recentchanges"

    id = Column("rc_id", Integer, primary_key=True, index=True)
    timestamp = Column("rc_timestamp", DateTime(), nullable=False, index=True)
    actor_id = Column("rc_actor", Integer, ForeignKey("actor.actor_id"), nullable=False, index=True)
    namespace = Column("rc_namespace", Integer, nullable=False, default=0)
    title = Column("rc_title", String(255), nullable=False)
    comment = Column("rc_comment", Text, nullable=False, default="")
    minor = Column("rc_minor", Boolean, nullable=False, default=False)
    source = Column("rc_source", String(16), nullable=False, default="mw.edit")
    log_action = Column("rc_log_action", String(255), nullable=True)


__all__ = ["RecentChangeModel"]
