"""Aggregate application use cases."""

from .activity import UserActivity, build_user_activity

__all__ = [
    "UserActivity",
    "build_user_activity",
]
