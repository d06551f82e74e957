"""Pydantic schemas for activity feed endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from useractivity.domain.entities import ActivityType


class ActivityItemRead(BaseModel):
    id: int = Field(..., description="Identifier of the row within its source")
    type: ActivityType = Field(..., description="Kind of activity")
    timestamp: int = Field(..., description="Seconds since the epoch")
    actor_name: str = Field(..., description="User who performed the action")
    target_title: str = Field("", description="Page the activity refers to")
    namespace: int = Field(0, description="Namespace of the page")
    recipient_name: str = Field("", description="User a relationship or message refers to")
    summary_text: str = Field("", description="Escaped, truncated comment or message")
    is_minor_edit: bool = Field(False, description="Edit was flagged as minor")
    is_new_page: bool = Field(False, description="Edit created the page")

    model_config = ConfigDict(from_attributes=True)


class SummaryLineRead(BaseModel):
    type: ActivityType = Field(..., description="Kind of activity summarized")
    timestamp: int = Field(..., description="Most recent activity in the group")
    text: str = Field(..., description="Localized summary of the group")

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ActivityItemRead", "SummaryLineRead"]
