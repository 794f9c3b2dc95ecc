"""SQLAlchemy declarative base and model imports for Alembic."""
from compass_badges.db.session import Base

# Import all models so Alembic can see them
from compass_badges.models.badge import Badge, UserBadge  # noqa: F401
from compass_badges.models.profile import UserProfile  # noqa: F401
from compass_badges.models.scenario import ContentBundle, Scenario  # noqa: F401
from compass_badges.models.score import PlayerScenarioScore  # noqa: F401
from compass_badges.models.session import GameSession  # noqa: F401

__all__ = [
    "Base",
    "Badge",
    "ContentBundle",
    "GameSession",
    "PlayerScenarioScore",
    "Scenario",
    "UserBadge",
    "UserProfile",
]
