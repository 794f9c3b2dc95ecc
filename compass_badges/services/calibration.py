"""Badge threshold calibration for a content bundle.

Content designers pick badge ``required_score`` values per axis from the
distribution of scores over every possible path through the bundle's
scenarios: all paths of all scenarios are pooled per axis and the requested
percentiles are read off that pool.
"""
import logging
from collections.abc import Sequence

from compass_badges.core.errors import InvalidInputError, NotFoundError
from compass_badges.repositories.base import ContentBundleRepository, ScenarioRepository
from compass_badges.schemas.badge import AxisScoreResultSchema
from compass_badges.schemas.scenario import ScenarioSchema
from compass_badges.services.axes import normalize_axis
from compass_badges.services.paths import enumerate_paths
from compass_badges.services.percentiles import calculate_percentiles

logger = logging.getLogger(__name__)

MIN_PERCENTILE = 0.0
MAX_PERCENTILE = 100.0


def validate_calibration_request(content_bundle_id: str | None, percentiles: Sequence[float] | None) -> None:
    """Raise InvalidInputError for a blank bundle id or a bad percentile list."""
    if content_bundle_id is None or not content_bundle_id.strip():
        raise InvalidInputError("Content bundle ID cannot be null or empty", field="content_bundle_id")
    if not percentiles:
        raise InvalidInputError("Percentiles array cannot be null or empty", field="percentiles")
    if not all(MIN_PERCENTILE <= p <= MAX_PERCENTILE for p in percentiles):
        raise InvalidInputError("Percentiles must be between 0 and 100", field="percentiles")


def pool_path_scores(scenarios: Sequence[ScenarioSchema]) -> dict[str, tuple[str, list[float]]]:
    """Collect every path score per axis: normalized key -> (display name, scores)."""
    pooled: dict[str, tuple[str, list[float]]] = {}
    for scenario in scenarios:
        logger.debug("Processing scenario %s: %s", scenario.id, scenario.title)
        for path in enumerate_paths(scenario):
            for axis, score in path.items():
                key = normalize_axis(axis)
                if key not in pooled:
                    pooled[key] = (axis, [])
                pooled[key][1].append(score)
    return pooled


async def calculate_badge_scores(
    content_bundle_id: str,
    percentiles: Sequence[float],
    bundles: ContentBundleRepository,
    scenarios: ScenarioRepository,
) -> list[AxisScoreResultSchema]:
    """Compute per-axis percentile scores over all paths of a bundle.

    Raises:
        InvalidInputError: Blank bundle id, empty percentiles, or a
            percentile outside 0..100 (checked before any lookup).
        NotFoundError: The bundle does not exist.
    """
    validate_calibration_request(content_bundle_id, percentiles)

    bundle = await bundles.get_by_id(content_bundle_id)
    if bundle is None:
        raise NotFoundError("Content bundle", content_bundle_id)

    logger.info(
        "Calculating badge scores for bundle %s with %d scenarios",
        content_bundle_id,
        len(bundle.scenario_ids),
    )

    loaded: list[ScenarioSchema] = []
    for scenario_id in bundle.scenario_ids:
        scenario = await scenarios.get_by_id(scenario_id)
        if scenario is None:
            logger.warning("Scenario %s not found in bundle %s", scenario_id, content_bundle_id)
            continue
        loaded.append(scenario)

    if not loaded:
        logger.warning("No scenarios found for bundle %s", content_bundle_id)
        return []

    results = []
    for axis_name, scores in pool_path_scores(loaded).values():
        results.append(
            AxisScoreResultSchema(
                axis_name=axis_name,
                path_count=len(scores),
                percentile_scores=calculate_percentiles(scores, percentiles),
            )
        )
        logger.info("Calculated percentiles for axis %s: %d paths analyzed", axis_name, len(scores))

    logger.info(
        "Badge score calculation complete for bundle %s: %d axes processed",
        content_bundle_id,
        len(results),
    )
    return results
