"""Scenario and content bundle models. Authored elsewhere; read-only here."""
from sqlalchemy import Column, String, Text

from compass_badges.db.session import Base

# SQLite doesn't have native JSON; scene graphs and bundle lists are JSON strings


class Scenario(Base):
    __tablename__ = "scenarios"

    id = Column(String(64), primary_key=True)
    title = Column(String(255), nullable=False, default="")
    # scenes: JSON array of {id, title, next_scene_id, branches: [{text, next_scene_id, compass_change}]}
    scenes_json = Column(Text, nullable=False, default="[]")


class ContentBundle(Base):
    __tablename__ = "content_bundles"

    id = Column(String(64), primary_key=True)
    title = Column(String(255), nullable=False, default="")
    # ordered JSON array of scenario ids
    scenario_ids_json = Column(Text, nullable=False, default="[]")
