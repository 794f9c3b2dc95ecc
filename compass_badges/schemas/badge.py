"""Pydantic schemas for badges, awards, calibration and progress."""
from datetime import datetime

from pydantic import BaseModel, Field


class BadgeSchema(BaseModel):
    id: str
    age_group_id: str
    compass_axis_id: str
    tier: str
    tier_order: int = 0
    title: str = ""
    description: str = ""
    required_score: float
    image_id: str | None = None

    class Config:
        from_attributes = True


class UserBadgeSchema(BaseModel):
    id: str | None = None
    user_profile_id: str
    badge_id: str
    badge_name: str = ""
    axis: str
    trigger_value: float
    threshold: float
    earned_at: datetime
    image_id: str | None = None

    class Config:
        from_attributes = True


class CalculateBadgeScoresRequest(BaseModel):
    content_bundle_id: str
    percentiles: list[float] = Field(default_factory=list)


class AxisScoreResultSchema(BaseModel):
    axis_name: str
    path_count: int
    percentile_scores: dict[float, float]


class BadgeTierProgressSchema(BaseModel):
    badge_id: str
    tier: str
    tier_order: int
    title: str
    required_score: float
    image_id: str | None = None
    is_earned: bool
    earned_at: datetime | None = None
    remaining_score: float


class AxisProgressSchema(BaseModel):
    axis: str
    current_score: float
    tiers: list[BadgeTierProgressSchema]


class BadgeProgressSchema(BaseModel):
    profile_id: str
    age_group_id: str
    axes: list[AxisProgressSchema]


class FinalizeSessionResultSchema(BaseModel):
    session_id: str
    scored: bool = False
    axis_totals: dict[str, float] = Field(default_factory=dict)
    new_badges: list[UserBadgeSchema] = Field(default_factory=list)
