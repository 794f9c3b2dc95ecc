"""Game session model: one playthrough of one scenario by one profile."""
from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.sql import func

from compass_badges.db.session import Base


class GameSession(Base):
    __tablename__ = "game_sessions"

    id = Column(String(64), primary_key=True)
    profile_id = Column(String(64), ForeignKey("user_profiles.id"), nullable=False, index=True)
    scenario_id = Column(String(64), nullable=False, index=True)
    # ordered JSON array of {scene_id, choice_text, compass_axis, compass_delta}
    choices_json = Column(Text, nullable=False, default="[]")
    started_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)
