"""Use cases building flat and grouped activity feeds."""

from .feed import assemble_feed, sort_by_timestamp
from .fetchers import (
    FetchResult,
    fetch_comments,
    fetch_edits,
    fetch_messages_sent,
    fetch_relationships,
    fetch_system_messages,
    resolve_actor_scope,
)
from .grouping import (
    RECENT_WINDOW_SECONDS,
    STACK_LIMIT,
    GroupSummarizer,
    compose_system_message_line,
)
from .normalizer import fix_item_comment
from .ports import ActivitySources
from .user_activity import UserActivity, build_user_activity

__all__ = [
    "ActivitySources",
    "FetchResult",
    "GroupSummarizer",
    "RECENT_WINDOW_SECONDS",
    "STACK_LIMIT",
    "UserActivity",
    "assemble_feed",
    "build_user_activity",
    "compose_system_message_line",
    "fetch_comments",
    "fetch_edits",
    "fetch_messages_sent",
    "fetch_relationships",
    "fetch_system_messages",
    "fix_item_comment",
    "resolve_actor_scope",
    "sort_by_timestamp",
]
