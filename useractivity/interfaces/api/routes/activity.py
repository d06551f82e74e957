"""Endpoints providing recent activity information."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from useractivity.application.use_cases.activity import UserActivity, build_user_activity
from useractivity.config import Settings, get_settings
from useractivity.domain.entities import ActivityFilter, ActivityItem, SummaryLine
from useractivity.infrastructure.database import get_db
from useractivity.interfaces.api.dependencies import get_activity_filter
from useractivity.interfaces.api.schemas import ActivityItemRead, SummaryLineRead

router = APIRouter(prefix="/activity", tags=["activity"])


def _item_to_schema(item: ActivityItem) -> ActivityItemRead:
    return ActivityItemRead.model_validate(item)


def _line_to_schema(line: SummaryLine) -> SummaryLineRead:
    return SummaryLineRead.model_validate(line)


def _user_activity(
    db: Session,
    activity_filter: ActivityFilter,
    settings: Settings,
    user_name: str | None = None,
) -> UserActivity:
    try:
        return build_user_activity(
            db,
            activity_filter=activity_filter,
            subject_name=user_name,
            settings=settings,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/", response_model=list[ActivityItemRead])
def read_site_activity(
    activity_filter: ActivityFilter = Depends(get_activity_filter),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> list[ActivityItemRead]:
    """Return the most recent activity of everyone, newest first."""

    activity = _user_activity(db, activity_filter, settings)
    return [_item_to_schema(item) for item in activity.get_activity_list()]


@router.get("/grouped", response_model=list[SummaryLineRead])
def read_site_activity_grouped(
    activity_filter: ActivityFilter = Depends(get_activity_filter),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> list[SummaryLineRead]:
    """Return summary lines for the activity of everyone."""

    activity = _user_activity(db, activity_filter, settings)
    return [_line_to_schema(line) for line in activity.get_activity_list_grouped()]


@router.get("/users/{user_name}", response_model=list[ActivityItemRead])
def read_user_activity(
    user_name: str,
    activity_filter: ActivityFilter = Depends(get_activity_filter),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> list[ActivityItemRead]:
    """Return the recent activity of ``user_name`` or of their circle."""

    activity = _user_activity(db, activity_filter, settings, user_name)
    return [_item_to_schema(item) for item in activity.get_activity_list()]


@router.get("/users/{user_name}/grouped", response_model=list[SummaryLineRead])
def read_user_activity_grouped(
    user_name: str,
    activity_filter: ActivityFilter = Depends(get_activity_filter),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> list[SummaryLineRead]:
    """Return summary lines for the recent activity of ``user_name``."""

    activity = _user_activity(db, activity_filter, settings, user_name)
    return [_line_to_schema(line) for line in activity.get_activity_list_grouped()]


__all__ = ["router"]
