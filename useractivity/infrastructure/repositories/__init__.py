"""Repository implementations for infrastructure layer."""

from .actor_repository import ActorRepository
from .comment_repository import CommentRepository
from .recent_change_repository import RecentChangeRepository
from .relationship_repository import RelationshipRepository
from .system_message_repository import SystemMessageRepository
from .user_board_repository import UserBoardRepository

__all__ = [
    "ActorRepository",
    "CommentRepository",
    "RecentChangeRepository",
    "RelationshipRepository",
    "SystemMessageRepository",
    "UserBoardRepository",
]
