"""Cross-session aggregation, session finalization and badge progress.

Finalizing a session scores it (first play of the scenario only), sums the
profile's scores over every scenario it has completed, and hands that
cumulative total to the badge awarding engine.
"""
import logging
from collections.abc import Iterable

from compass_badges.core.errors import InvalidInputError, NotFoundError
from compass_badges.repositories.base import Repositories
from compass_badges.schemas.badge import (
    AxisProgressSchema,
    BadgeProgressSchema,
    BadgeTierProgressSchema,
    FinalizeSessionResultSchema,
)
from compass_badges.schemas.session import PlayerScenarioScoreSchema, UserProfileSchema
from compass_badges.services.axes import AxisScores
from compass_badges.services.badge_awarding import award_badges, group_badges_by_axis, resolve_age_group
from compass_badges.services.session_scoring import score_session

logger = logging.getLogger(__name__)


def aggregate_axis_scores(records: Iterable[PlayerScenarioScoreSchema]) -> AxisScores:
    """Sum axis scores across score records (case-insensitive axes)."""
    totals = AxisScores()
    for record in records:
        totals.merge(record.axis_scores)
    return totals


async def get_cumulative_axis_scores(profile_id: str, repos: Repositories) -> AxisScores:
    return aggregate_axis_scores(await repos.scores.get_by_profile_id(profile_id))


async def finalize_session(session_id: str, repos: Repositories) -> FinalizeSessionResultSchema:
    """Score a finished session and award badges for the new cumulative totals.

    Replays (scenario already scored for the profile) award nothing.

    Raises:
        InvalidInputError: Blank session id.
        NotFoundError: Unknown session, or its profile no longer exists.
    """
    if not session_id or not session_id.strip():
        raise InvalidInputError("Session ID cannot be null or empty", field="session_id")

    session = await repos.sessions.get_by_id(session_id)
    if session is None:
        raise NotFoundError("Game session", session_id)

    profile = await repos.profiles.get_by_id(session.profile_id)
    if profile is None:
        raise NotFoundError("User profile", session.profile_id)

    result = FinalizeSessionResultSchema(session_id=session.id)

    score = await score_session(session, profile, repos.scores)
    if score is None:
        logger.info("Session %s is a replay for profile %s; no badges evaluated", session.id, profile.id)
        return result

    totals = await get_cumulative_axis_scores(profile.id, repos)
    result.scored = True
    result.axis_totals = totals.to_dict()
    result.new_badges = await award_badges(profile, totals, repos.badges, repos.user_badges)

    logger.info(
        "Finalized session %s for profile %s: %d new badge(s)",
        session.id,
        profile.id,
        len(result.new_badges),
    )
    return result


async def get_badge_progress(profile: UserProfileSchema, repos: Repositories) -> BadgeProgressSchema:
    """Per-axis tier progress: earned flags and remaining score per tier."""
    age_group_id = resolve_age_group(profile)
    catalog = await repos.badges.get_by_age_group(age_group_id)
    earned = {b.badge_id: b for b in await repos.user_badges.get_by_user_profile_id(profile.id)}
    totals = await get_cumulative_axis_scores(profile.id, repos)

    axes = []
    for axis_key, tiers in sorted(group_badges_by_axis(catalog).items()):
        current = totals.get(axis_key, 0.0)
        tier_progress = []
        for badge in tiers:
            award = earned.get(badge.id)
            tier_progress.append(
                BadgeTierProgressSchema(
                    badge_id=badge.id,
                    tier=badge.tier,
                    tier_order=badge.tier_order,
                    title=badge.title,
                    required_score=badge.required_score,
                    image_id=badge.image_id,
                    is_earned=award is not None,
                    earned_at=award.earned_at if award is not None else None,
                    remaining_score=max(0.0, badge.required_score - current),
                )
            )
        axes.append(
            AxisProgressSchema(
                axis=tiers[0].compass_axis_id,
                current_score=current,
                tiers=tier_progress,
            )
        )

    return BadgeProgressSchema(profile_id=profile.id, age_group_id=age_group_id, axes=axes)
