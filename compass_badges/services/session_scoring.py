"""Realized axis scores of one completed session; scored once per scenario."""
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Optional

from compass_badges.core.errors import DuplicateRecordError
from compass_badges.repositories.base import PlayerScenarioScoreRepository
from compass_badges.schemas.session import (
    GameSessionSchema,
    PlayerScenarioScoreSchema,
    SessionChoiceSchema,
    UserProfileSchema,
)
from compass_badges.services.axes import AxisScores, is_blank_axis

logger = logging.getLogger(__name__)


def compute_session_axis_scores(choices: Iterable[SessionChoiceSchema]) -> AxisScores:
    """Sum compass deltas per axis; choices without axis or delta count for nothing."""
    totals = AxisScores()
    for choice in choices:
        if is_blank_axis(choice.compass_axis) or choice.compass_delta is None:
            continue
        totals.add(choice.compass_axis, choice.compass_delta)
    return totals


async def score_session(
    session: GameSessionSchema,
    profile: UserProfileSchema,
    scores: PlayerScenarioScoreRepository,
) -> Optional[PlayerScenarioScoreSchema]:
    """Persist the session's axis totals unless the scenario was already scored.

    Returns the new record, or None when ``(profile, scenario)`` already has a
    score (a replay). Nothing is ever updated.
    """
    existing = await scores.get_by_profile_and_scenario(profile.id, session.scenario_id)
    if existing is not None:
        logger.info(
            "Scenario %s already scored for profile %s (session %s); skipping",
            session.scenario_id,
            profile.id,
            existing.game_session_id,
        )
        return None

    totals = compute_session_axis_scores(session.choice_history)
    record = PlayerScenarioScoreSchema(
        profile_id=profile.id,
        scenario_id=session.scenario_id,
        game_session_id=session.id,
        axis_scores=totals.to_dict(),
        created_at=datetime.now(timezone.utc),
    )

    try:
        saved = await scores.add(record)
    except DuplicateRecordError:
        # another finalizer committed first; storage kept its record
        logger.warning(
            "Lost scoring race for profile %s scenario %s (session %s)",
            profile.id,
            session.scenario_id,
            session.id,
        )
        return None

    logger.info(
        "Scored session %s for profile %s on scenario %s: %s",
        session.id,
        profile.id,
        session.scenario_id,
        saved.axis_scores,
    )
    return saved
