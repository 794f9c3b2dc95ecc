"""Pydantic schemas for scenario graphs and content bundles."""
from pydantic import BaseModel, Field


class CompassChangeSchema(BaseModel):
    axis: str
    delta: float = 0.0


class BranchSchema(BaseModel):
    text: str = ""
    next_scene_id: str | None = None
    compass_change: CompassChangeSchema | None = None


class SceneSchema(BaseModel):
    id: str
    title: str = ""
    branches: list[BranchSchema] = Field(default_factory=list)
    next_scene_id: str | None = None  # linear scenes only


class ScenarioSchema(BaseModel):
    id: str
    title: str = ""
    scenes: list[SceneSchema] = Field(default_factory=list)  # first scene is the entry point

    class Config:
        from_attributes = True


class ContentBundleSchema(BaseModel):
    id: str
    title: str = ""
    scenario_ids: list[str] = Field(default_factory=list)

    class Config:
        from_attributes = True
