"""SQLAlchemy model for page comments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from useractivity.infrastructure.database import Base


class CommentModel(Base):
    """Comment left by a user on a page.

    The table belongs to an optional extension and may be absent.
    """

    __tablename__ = "Comments"

    id = Column("CommentID", Integer, primary_key=True, index=True)
    page_id = Column("Comment_Page_ID", Integer, ForeignKey("page.page_id"), nullable=False, index=True)
    actor_id = Column("Comment_actor", Integer, ForeignKey("actor.actor_id"), nullable=False, index=True)
    text = Column("Comment_Text", Text, nullable=False, default="")
    ip = Column("Comment_IP", String(45), nullable=True)
    created_at = Column("Comment_Date", DateTime(), nullable=False)


__all__ = ["CommentModel"]
