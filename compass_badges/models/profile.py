"""User profile: a player; its age group selects the badge catalog."""
from sqlalchemy import Column, String

from compass_badges.db.session import Base


class UserProfile(Base):
    __tablename__ = "user_profiles"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False, default="")
    age_group = Column(String(32), nullable=True)  # toddlers | preschoolers | school | preteens | teens | adults
