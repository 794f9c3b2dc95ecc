"""Player scenario score: realized axis totals of a profile's first playthrough."""
from sqlalchemy import Column, DateTime, ForeignKey, String, Text, UniqueConstraint

from compass_badges.db.session import Base


class PlayerScenarioScore(Base):
    __tablename__ = "player_scenario_scores"
    # at most one score per (profile, scenario); replays are never re-scored
    __table_args__ = (
        UniqueConstraint("profile_id", "scenario_id", name="uq_player_scenario_scores_profile_scenario"),
    )

    id = Column(String(64), primary_key=True)
    profile_id = Column(String(64), ForeignKey("user_profiles.id"), nullable=False, index=True)
    scenario_id = Column(String(64), nullable=False)
    game_session_id = Column(String(64), nullable=False)
    axis_scores_json = Column(Text, nullable=False, default="{}")  # {axis: cumulative delta}
    created_at = Column(DateTime(timezone=True), nullable=False)
