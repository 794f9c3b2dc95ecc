"""Depth-first enumeration of every playthrough path of a scenario.

A path runs from the entry scene (the first scene in authoring order) to a
terminal point: a branch or scene with no resolvable next scene, or a scene
already visited on the same path (cycle truncation). Each path is reported
as the cumulative compass delta per axis collected from the branches taken.
"""
import logging
from collections.abc import Iterator
from typing import Optional

from compass_badges.schemas.scenario import ScenarioSchema, SceneSchema
from compass_badges.services.axes import AxisScores, is_blank_axis

logger = logging.getLogger(__name__)


def _resolve(lookup: dict[str, SceneSchema], scene_id: str | None) -> Optional[SceneSchema]:
    if not scene_id or not scene_id.strip():
        return None
    return lookup.get(scene_id)


def iter_paths(scenario: ScenarioSchema) -> Iterator[AxisScores]:
    """Yield the axis totals of each path, in depth-first branch order.

    Worklist entries are (scene, visited, scores); a ``None`` scene marks a
    completed path to emit. ``visited`` is a frozenset, so each branch owns
    its own copy and sibling branches never see each other's scenes.
    Paths that collected no compass change are not reported.
    """
    scenes = scenario.scenes or []
    if not scenes:
        return

    lookup = {scene.id: scene for scene in scenes}
    stack: list[tuple[Optional[SceneSchema], frozenset, AxisScores]] = [
        (scenes[0], frozenset(), AxisScores())
    ]

    while stack:
        scene, visited, scores = stack.pop()

        if scene is None:
            if scores:
                yield scores
            continue

        if scene.id in visited:
            # cycle: the path ends here with what it has
            if scores:
                yield scores
            continue

        visited = visited | {scene.id}

        if scene.branches:
            pending = []
            for branch in scene.branches:
                branch_scores = scores.copy()
                change = branch.compass_change
                if change is not None and not is_blank_axis(change.axis):
                    branch_scores.add(change.axis, change.delta)
                pending.append((_resolve(lookup, branch.next_scene_id), visited, branch_scores))
            # reversed so the first branch is explored first
            stack.extend(reversed(pending))
            continue

        # linear scenes carry no compass change
        stack.append((_resolve(lookup, scene.next_scene_id), visited, scores))


def enumerate_paths(scenario: ScenarioSchema) -> list[AxisScores]:
    """Return all path score maps for a scenario (empty without scenes)."""
    paths = list(iter_paths(scenario))
    logger.debug("Found %d paths in scenario %s", len(paths), scenario.id)
    return paths
