"""Repository ports and their SQLAlchemy implementations.

Usage:
    from compass_badges.repositories import get_sql_repositories

    async with AsyncSessionLocal() as db:
        repos = get_sql_repositories(db)
        badges = await repos.badges.get_by_age_group("school")
"""

from compass_badges.repositories.base import (
    BadgeRepository,
    ContentBundleRepository,
    GameSessionRepository,
    PlayerScenarioScoreRepository,
    Repositories,
    ScenarioRepository,
    UserBadgeRepository,
    UserProfileRepository,
)
from compass_badges.repositories.sql import (
    SqlBadgeRepository,
    SqlContentBundleRepository,
    SqlGameSessionRepository,
    SqlPlayerScenarioScoreRepository,
    SqlScenarioRepository,
    SqlUserBadgeRepository,
    SqlUserProfileRepository,
    get_sql_repositories,
)

__all__ = [
    # Abstract interfaces
    "ScenarioRepository",
    "ContentBundleRepository",
    "GameSessionRepository",
    "UserProfileRepository",
    "PlayerScenarioScoreRepository",
    "BadgeRepository",
    "UserBadgeRepository",
    "Repositories",
    # SQLAlchemy implementations
    "SqlScenarioRepository",
    "SqlContentBundleRepository",
    "SqlGameSessionRepository",
    "SqlUserProfileRepository",
    "SqlPlayerScenarioScoreRepository",
    "SqlBadgeRepository",
    "SqlUserBadgeRepository",
    "get_sql_repositories",
]
