"""Percentile estimation with linear interpolation between closest ranks."""
import math
from collections.abc import Iterable, Sequence


def calculate_percentile(sorted_scores: Sequence[float], percentile: float) -> float:
    """Return the value at percentile (0-100) of ascending-sorted scores.

    Position is ``p/100 * (n-1)``; values between two ranks are linearly
    interpolated. Empty input returns 0.0.
    """
    count = len(sorted_scores)
    if count == 0:
        return 0.0
    if count == 1:
        return float(sorted_scores[0])

    position = (percentile / 100.0) * (count - 1)
    lower = min(max(math.floor(position), 0), count - 1)
    upper = min(max(math.ceil(position), 0), count - 1)

    if lower == upper:
        return float(sorted_scores[lower])

    lower_value = sorted_scores[lower]
    upper_value = sorted_scores[upper]
    return lower_value + (upper_value - lower_value) * (position - lower)


def calculate_percentiles(scores: Iterable[float], percentiles: Iterable[float]) -> dict[float, float]:
    """Map each requested percentile to its interpolated score.

    No scores gives an empty map; a single score is returned for every
    percentile.
    """
    sorted_scores = sorted(scores)
    if not sorted_scores:
        return {}
    return {float(p): calculate_percentile(sorted_scores, p) for p in percentiles}
