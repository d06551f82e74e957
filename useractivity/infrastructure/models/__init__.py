"""ORM models used by the application infrastructure."""

from .actor import ActorModel
from .comment import CommentModel
from .page import PageModel
from .recent_change import RecentChangeModel
from .user_board import UserBoardModel
from .user_relationship import UserRelationshipModel
from .user_system_message import UserSystemMessageModel

__all__ = [
    "ActorModel",
    "CommentModel",
    "PageModel",
    "RecentChangeModel",
    "UserBoardModel",
    "UserRelationshipModel",
    "UserSystemMessageModel",
]
