"""Tiered badge awards from cumulative axis scores.

Badges are permanent: once a profile's cumulative score on an axis reaches a
tier's ``required_score`` the tier is awarded and never revoked, even if
later play lowers the axis score.
"""
import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone

from compass_badges.core.config import get_settings
from compass_badges.core.errors import DuplicateRecordError
from compass_badges.repositories.base import BadgeRepository, UserBadgeRepository
from compass_badges.schemas.badge import BadgeSchema, UserBadgeSchema
from compass_badges.schemas.session import UserProfileSchema
from compass_badges.services.axes import AxisScores, normalize_axis

logger = logging.getLogger(__name__)


def resolve_age_group(profile: UserProfileSchema) -> str:
    """Age group whose catalog applies; blank groups fall back to the configured default."""
    if profile.age_group and profile.age_group.strip():
        return profile.age_group.strip()
    return get_settings().default_age_group


def group_badges_by_axis(badges: Iterable[BadgeSchema]) -> dict[str, list[BadgeSchema]]:
    """Group catalog badges by normalized axis, each group sorted by tier_order."""
    grouped: dict[str, list[BadgeSchema]] = {}
    for badge in badges:
        grouped.setdefault(normalize_axis(badge.compass_axis_id), []).append(badge)
    for tiers in grouped.values():
        tiers.sort(key=lambda b: b.tier_order)
    return grouped


def qualifying_badges(tiers: Iterable[BadgeSchema], score: float) -> list[BadgeSchema]:
    """Return every tier whose threshold the score reaches, in tier order."""
    return [badge for badge in tiers if badge.required_score <= score]


async def award_badges(
    profile: UserProfileSchema,
    axis_scores: Mapping[str, float],
    badges: BadgeRepository,
    user_badges: UserBadgeRepository,
) -> list[UserBadgeSchema]:
    """Award every qualifying tier the profile does not hold yet.

    ``axis_scores`` is the profile's current cumulative score per axis.
    Crossing several tiers at once awards all of them in this call. Badges
    already held are skipped and not returned. Blank axis names are ignored
    and spellings of the same axis are summed.
    """
    age_group_id = resolve_age_group(profile)
    catalog = await badges.get_by_age_group(age_group_id)
    if not catalog:
        logger.warning("No badges configured for age group %s (profile %s)", age_group_id, profile.id)
        return []

    scores = AxisScores(axis_scores)
    earned = await user_badges.get_by_user_profile_id(profile.id)
    earned_badge_ids = {b.badge_id for b in earned if b.badge_id}

    new_badges: list[UserBadgeSchema] = []
    for axis_key, tiers in group_badges_by_axis(catalog).items():
        if axis_key not in scores:
            continue
        score = scores[axis_key]

        for badge in qualifying_badges(tiers, score):
            if badge.id in earned_badge_ids:
                continue

            award = UserBadgeSchema(
                user_profile_id=profile.id,
                badge_id=badge.id,
                badge_name=badge.title,
                axis=badge.compass_axis_id,
                trigger_value=score,
                threshold=badge.required_score,
                earned_at=datetime.now(timezone.utc),
                image_id=badge.image_id,
            )
            try:
                saved = await user_badges.add(award)
            except DuplicateRecordError:
                logger.warning("Badge %s was awarded to profile %s concurrently; skipping", badge.id, profile.id)
                earned_badge_ids.add(badge.id)
                continue

            new_badges.append(saved)
            earned_badge_ids.add(badge.id)
            logger.info(
                "Awarded badge %s (%s) to profile %s on axis %s",
                badge.id,
                badge.title,
                profile.id,
                badge.compass_axis_id,
            )

    if new_badges:
        logger.info("Awarded %d badges to profile %s", len(new_badges), profile.id)
    return new_badges
