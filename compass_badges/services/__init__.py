from compass_badges.services.axes import AxisScores, normalize_axis
from compass_badges.services.badge_awarding import award_badges
from compass_badges.services.calibration import calculate_badge_scores
from compass_badges.services.paths import enumerate_paths, iter_paths
from compass_badges.services.percentiles import calculate_percentile, calculate_percentiles
from compass_badges.services.progression import (
    aggregate_axis_scores,
    finalize_session,
    get_badge_progress,
)
from compass_badges.services.session_scoring import compute_session_axis_scores, score_session

__all__ = [
    "AxisScores",
    "aggregate_axis_scores",
    "award_badges",
    "calculate_badge_scores",
    "calculate_percentile",
    "calculate_percentiles",
    "compute_session_axis_scores",
    "enumerate_paths",
    "finalize_session",
    "get_badge_progress",
    "iter_paths",
    "normalize_axis",
    "score_session",
]
