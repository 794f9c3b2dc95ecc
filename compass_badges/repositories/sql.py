"""SQLAlchemy (async) implementations of the repository ports."""
import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from compass_badges.core.errors import DuplicateRecordError
from compass_badges.models.badge import Badge, UserBadge
from compass_badges.models.profile import UserProfile
from compass_badges.models.scenario import ContentBundle, Scenario
from compass_badges.models.score import PlayerScenarioScore
from compass_badges.models.session import GameSession
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
from compass_badges.schemas.badge import BadgeSchema, UserBadgeSchema
from compass_badges.schemas.scenario import ContentBundleSchema, ScenarioSchema
from compass_badges.schemas.session import (
    GameSessionSchema,
    PlayerScenarioScoreSchema,
    UserProfileSchema,
)

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


async def _commit_unique(db: AsyncSession, table: str, key: tuple[str, ...]) -> None:
    """Commit the pending row; a unique violation becomes DuplicateRecordError."""
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Rejected duplicate %s row for key %s", table, key)
        raise DuplicateRecordError(table, key) from exc


class SqlScenarioRepository(ScenarioRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, scenario_id: str) -> Optional[ScenarioSchema]:
        result = await self.db.execute(select(Scenario).where(Scenario.id == scenario_id))
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return ScenarioSchema(id=row.id, title=row.title or "", scenes=json.loads(row.scenes_json or "[]"))


class SqlContentBundleRepository(ContentBundleRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, bundle_id: str) -> Optional[ContentBundleSchema]:
        result = await self.db.execute(select(ContentBundle).where(ContentBundle.id == bundle_id))
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return ContentBundleSchema(
            id=row.id,
            title=row.title or "",
            scenario_ids=json.loads(row.scenario_ids_json or "[]"),
        )


class SqlGameSessionRepository(GameSessionRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, session_id: str) -> Optional[GameSessionSchema]:
        result = await self.db.execute(select(GameSession).where(GameSession.id == session_id))
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return GameSessionSchema(
            id=row.id,
            profile_id=row.profile_id,
            scenario_id=row.scenario_id,
            choice_history=json.loads(row.choices_json or "[]"),
        )


class SqlUserProfileRepository(UserProfileRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, profile_id: str) -> Optional[UserProfileSchema]:
        result = await self.db.execute(select(UserProfile).where(UserProfile.id == profile_id))
        row = result.scalar_one_or_none()
        return UserProfileSchema.model_validate(row) if row is not None else None


def _score_to_schema(row: PlayerScenarioScore) -> PlayerScenarioScoreSchema:
    return PlayerScenarioScoreSchema(
        id=row.id,
        profile_id=row.profile_id,
        scenario_id=row.scenario_id,
        game_session_id=row.game_session_id,
        axis_scores=json.loads(row.axis_scores_json or "{}"),
        created_at=row.created_at,
    )


class SqlPlayerScenarioScoreRepository(PlayerScenarioScoreRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_profile_and_scenario(
        self, profile_id: str, scenario_id: str
    ) -> Optional[PlayerScenarioScoreSchema]:
        result = await self.db.execute(
            select(PlayerScenarioScore).where(
                PlayerScenarioScore.profile_id == profile_id,
                PlayerScenarioScore.scenario_id == scenario_id,
            )
        )
        row = result.scalar_one_or_none()
        return _score_to_schema(row) if row is not None else None

    async def get_by_profile_id(self, profile_id: str) -> list[PlayerScenarioScoreSchema]:
        result = await self.db.execute(
            select(PlayerScenarioScore)
            .where(PlayerScenarioScore.profile_id == profile_id)
            .order_by(PlayerScenarioScore.created_at.asc())
        )
        return [_score_to_schema(row) for row in result.scalars().all()]

    async def add(self, score: PlayerScenarioScoreSchema) -> PlayerScenarioScoreSchema:
        row = PlayerScenarioScore(
            id=score.id or _new_id(),
            profile_id=score.profile_id,
            scenario_id=score.scenario_id,
            game_session_id=score.game_session_id,
            axis_scores_json=json.dumps(score.axis_scores),
            created_at=score.created_at or datetime.now(timezone.utc),
        )
        self.db.add(row)
        await _commit_unique(self.db, PlayerScenarioScore.__tablename__, (score.profile_id, score.scenario_id))
        return _score_to_schema(row)


class SqlBadgeRepository(BadgeRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_age_group(self, age_group_id: str) -> list[BadgeSchema]:
        # ordering by tier happens in the services, per axis
        result = await self.db.execute(select(Badge).where(Badge.age_group_id == age_group_id))
        return [BadgeSchema.model_validate(row) for row in result.scalars().all()]


class SqlUserBadgeRepository(UserBadgeRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_user_profile_id(self, profile_id: str) -> list[UserBadgeSchema]:
        result = await self.db.execute(
            select(UserBadge)
            .where(UserBadge.user_profile_id == profile_id)
            .order_by(UserBadge.earned_at.asc())
        )
        return [UserBadgeSchema.model_validate(row) for row in result.scalars().all()]

    async def add(self, user_badge: UserBadgeSchema) -> UserBadgeSchema:
        row = UserBadge(
            id=user_badge.id or _new_id(),
            user_profile_id=user_badge.user_profile_id,
            badge_id=user_badge.badge_id,
            badge_name=user_badge.badge_name,
            axis=user_badge.axis,
            trigger_value=user_badge.trigger_value,
            threshold=user_badge.threshold,
            earned_at=user_badge.earned_at,
            image_id=user_badge.image_id,
        )
        self.db.add(row)
        await _commit_unique(self.db, UserBadge.__tablename__, (user_badge.user_profile_id, user_badge.badge_id))
        return UserBadgeSchema.model_validate(row)


def get_sql_repositories(db: AsyncSession) -> Repositories:
    """Wire every port to the same session (one unit of work)."""
    return Repositories(
        scenarios=SqlScenarioRepository(db),
        bundles=SqlContentBundleRepository(db),
        sessions=SqlGameSessionRepository(db),
        profiles=SqlUserProfileRepository(db),
        scores=SqlPlayerScenarioScoreRepository(db),
        badges=SqlBadgeRepository(db),
        user_badges=SqlUserBadgeRepository(db),
    )
