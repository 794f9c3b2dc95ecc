"""Badge catalog and permanent badge awards."""
from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, UniqueConstraint

from compass_badges.db.session import Base


class Badge(Base):
    __tablename__ = "badges"

    id = Column(String(64), primary_key=True)
    age_group_id = Column(String(32), nullable=False, index=True)
    compass_axis_id = Column(String(64), nullable=False)
    tier = Column(String(32), nullable=False)  # bronze | silver | gold ...
    tier_order = Column(Integer, nullable=False, default=0)
    title = Column(String(255), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    required_score = Column(Float, nullable=False)
    image_id = Column(String(255), nullable=True)


class UserBadge(Base):
    __tablename__ = "user_badges"
    # badges are awarded once and never revoked
    __table_args__ = (
        UniqueConstraint("user_profile_id", "badge_id", name="uq_user_badges_profile_badge"),
    )

    id = Column(String(64), primary_key=True)
    user_profile_id = Column(String(64), ForeignKey("user_profiles.id"), nullable=False, index=True)
    badge_id = Column(String(64), ForeignKey("badges.id"), nullable=False)
    badge_name = Column(String(255), nullable=False, default="")
    axis = Column(String(64), nullable=False)
    trigger_value = Column(Float, nullable=False)  # axis score when awarded
    threshold = Column(Float, nullable=False)
    earned_at = Column(DateTime(timezone=True), nullable=False)
    image_id = Column(String(255), nullable=True)
