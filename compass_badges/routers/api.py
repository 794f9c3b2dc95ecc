"""API routes: JSON for badge calibration, session finalization, badge progress."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from compass_badges.core.errors import DuplicateRecordError, InvalidInputError, NotFoundError
from compass_badges.db.session import get_db
from compass_badges.repositories.base import Repositories
from compass_badges.repositories.sql import get_sql_repositories
from compass_badges.schemas.badge import (
    AxisScoreResultSchema,
    BadgeProgressSchema,
    CalculateBadgeScoresRequest,
    FinalizeSessionResultSchema,
    UserBadgeSchema,
)
from compass_badges.schemas.session import UserProfileSchema
from compass_badges.services.calibration import calculate_badge_scores
from compass_badges.services.progression import finalize_session, get_badge_progress

router = APIRouter(prefix="/api", tags=["api"])


def get_repositories(db: Annotated[AsyncSession, Depends(get_db)]) -> Repositories:
    return get_sql_repositories(db)


async def get_profile_or_404(
    profile_id: str,
    repos: Annotated[Repositories, Depends(get_repositories)],
) -> UserProfileSchema:
    profile = await repos.profiles.get_by_id(profile_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.post("/badges/calculate-scores", response_model=list[AxisScoreResultSchema])
async def calculate_scores(
    body: CalculateBadgeScoresRequest,
    repos: Annotated[Repositories, Depends(get_repositories)],
):
    """Percentile scores per compass axis over every path of a content bundle."""
    try:
        return await calculate_badge_scores(
            body.content_bundle_id,
            body.percentiles,
            repos.bundles,
            repos.scenarios,
        )
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("/sessions/{session_id}/finalize", response_model=FinalizeSessionResultSchema)
async def finalize(
    session_id: str,
    repos: Annotated[Repositories, Depends(get_repositories)],
):
    """Score a completed session and award any newly reached badges."""
    try:
        return await finalize_session(session_id, repos)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except DuplicateRecordError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.get("/profiles/{profile_id}/badges", response_model=list[UserBadgeSchema])
async def list_profile_badges(
    profile: Annotated[UserProfileSchema, Depends(get_profile_or_404)],
    repos: Annotated[Repositories, Depends(get_repositories)],
):
    """Badges the profile has earned, oldest first."""
    return await repos.user_badges.get_by_user_profile_id(profile.id)


@router.get("/profiles/{profile_id}/badge-progress", response_model=BadgeProgressSchema)
async def profile_badge_progress(
    profile: Annotated[UserProfileSchema, Depends(get_profile_or_404)],
    repos: Annotated[Repositories, Depends(get_repositories)],
):
    """Tier-by-tier progress for each axis of the profile's badge catalog."""
    return await get_badge_progress(profile, repos)
