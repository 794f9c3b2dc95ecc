"""Abstract repository interfaces consumed by the scoring engine.

Services only see these ports and the pydantic schemas they return; the
SQLAlchemy backend in :mod:`compass_badges.repositories.sql` implements them.
Uniqueness of score and award records is the storage layer's job: ``add``
raises :class:`~compass_badges.core.errors.DuplicateRecordError` when the
natural key already exists.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from compass_badges.schemas.badge import BadgeSchema, UserBadgeSchema
from compass_badges.schemas.scenario import ContentBundleSchema, ScenarioSchema
from compass_badges.schemas.session import (
    GameSessionSchema,
    PlayerScenarioScoreSchema,
    UserProfileSchema,
)


class ScenarioRepository(ABC):
    """Read access to authored scenarios."""

    @abstractmethod
    async def get_by_id(self, scenario_id: str) -> Optional[ScenarioSchema]:
        """Load a scenario with its scene graph, or None if not found."""


class ContentBundleRepository(ABC):
    """Read access to content bundles."""

    @abstractmethod
    async def get_by_id(self, bundle_id: str) -> Optional[ContentBundleSchema]:
        """Load a bundle, or None if not found."""


class GameSessionRepository(ABC):
    @abstractmethod
    async def get_by_id(self, session_id: str) -> Optional[GameSessionSchema]:
        """Load a session with its ordered choice history."""


class UserProfileRepository(ABC):
    @abstractmethod
    async def get_by_id(self, profile_id: str) -> Optional[UserProfileSchema]:
        """Load a profile, or None if not found."""


class PlayerScenarioScoreRepository(ABC):
    """Score records, unique per (profile_id, scenario_id)."""

    @abstractmethod
    async def get_by_profile_and_scenario(
        self, profile_id: str, scenario_id: str
    ) -> Optional[PlayerScenarioScoreSchema]:
        """Return the existing score for the pair, or None."""

    @abstractmethod
    async def get_by_profile_id(self, profile_id: str) -> list[PlayerScenarioScoreSchema]:
        """Return every score recorded for the profile (any order)."""

    @abstractmethod
    async def add(self, score: PlayerScenarioScoreSchema) -> PlayerScenarioScoreSchema:
        """Persist a new score and return it with its assigned id.

        Raises:
            DuplicateRecordError: If the pair was already scored.
        """


class BadgeRepository(ABC):
    """Badge catalog."""

    @abstractmethod
    async def get_by_age_group(self, age_group_id: str) -> list[BadgeSchema]:
        """Return all badges for an age group; empty for unknown groups."""


class UserBadgeRepository(ABC):
    """Awarded badges, unique per (user_profile_id, badge_id)."""

    @abstractmethod
    async def get_by_user_profile_id(self, profile_id: str) -> list[UserBadgeSchema]:
        """Return every badge the profile has earned."""

    @abstractmethod
    async def add(self, user_badge: UserBadgeSchema) -> UserBadgeSchema:
        """Persist a new award and return it with its assigned id.

        Raises:
            DuplicateRecordError: If the profile already holds the badge.
        """


@dataclass
class Repositories:
    """The full set of ports, as wired for one unit of work."""

    scenarios: ScenarioRepository
    bundles: ContentBundleRepository
    sessions: GameSessionRepository
    profiles: UserProfileRepository
    scores: PlayerScenarioScoreRepository
    badges: BadgeRepository
    user_badges: UserBadgeRepository
