"""Pydantic schemas for profiles, game sessions and realized scores."""
from datetime import datetime

from pydantic import BaseModel, Field


class UserProfileSchema(BaseModel):
    id: str
    name: str = ""
    age_group: str | None = None

    class Config:
        from_attributes = True


class SessionChoiceSchema(BaseModel):
    scene_id: str = ""
    choice_text: str = ""
    compass_axis: str | None = None
    compass_delta: float | None = None


class GameSessionSchema(BaseModel):
    id: str
    profile_id: str
    scenario_id: str
    choice_history: list[SessionChoiceSchema] = Field(default_factory=list)


class PlayerScenarioScoreSchema(BaseModel):
    id: str | None = None
    profile_id: str
    scenario_id: str
    game_session_id: str
    axis_scores: dict[str, float] = Field(default_factory=dict)
    created_at: datetime | None = None

    class Config:
        from_attributes = True
