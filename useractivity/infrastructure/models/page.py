"""SQLAlchemy model for wiki pages."""

from sqlalchemy import Column, Integer, String, UniqueConstraint

from useractivity.infrastructure.database import Base


class PageModel(Base):
    """Page referenced by comments."""

    __tablename__ = "page"
    __table_args__ = (UniqueConstraint("page_namespace", "page_title"),)

    id = Column("page_id", Integer, primary_key=True, index=True)
    namespace = Column("page_namespace", Integer, nullable=False, default=0)
    title = Column("page_title", String(255), nullable=False)


__all__ = ["PageModel"]
