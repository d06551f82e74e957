"""FastAPI dependency utilities."""

from fastapi import Depends, Query

from useractivity.config import Settings, get_settings
from useractivity.domain.entities import ActivityFilter


def get_activity_filter(
    filter_name: str = Query(
        "user",
        alias="filter",
        description="Whose activity to show: user, friends, foes or all",
    ),
    limit: int | None = Query(
        None, ge=1, le=500, description="Maximum number of rows read from each source"
    ),
    show_edits: bool = Query(True),
    show_comments: bool = Query(True),
    show_relationships: bool = Query(True),
    show_system_messages: bool = Query(True),
    show_messages_sent: bool = Query(True),
    settings: Settings = Depends(get_settings),
) -> ActivityFilter:
    """Build the :class:`ActivityFilter` described by the query string."""

    return ActivityFilter.from_name(
        filter_name,
        limit or settings.activity_item_max,
        show_edits=show_edits,
        show_comments=show_comments,
        show_relationships=show_relationships,
        show_system_messages=show_system_messages,
        show_messages_sent=show_messages_sent,
    )
