"""Tests for percentile estimation."""

import random

import pytest

from compass_badges.services.percentiles import calculate_percentile, calculate_percentiles


class TestCalculatePercentiles:
    def test_interpolates_between_ranks(self):
        result = calculate_percentiles([50, 10, 40, 20, 30], [0, 25, 50, 90, 100])

        assert result[0.0] == 10
        assert result[25.0] == 20
        assert result[50.0] == 30
        assert result[90.0] == pytest.approx(46.0)
        assert result[100.0] == 50

    def test_two_scores_median_is_midpoint(self):
        assert calculate_percentiles([1.0, 2.0], [50]) == {50.0: 1.5}

    def test_no_scores_gives_empty_map(self):
        assert calculate_percentiles([], [10, 50, 90]) == {}

    @pytest.mark.parametrize("percentile", [0, 12.5, 50, 99, 100])
    def test_single_score_for_every_percentile(self, percentile):
        assert calculate_percentiles([7.25], [percentile]) == {float(percentile): 7.25}

    def test_monotonic_in_percentile(self):
        rng = random.Random(1234)
        scores = [rng.uniform(-20, 20) for _ in range(37)]
        requested = [p / 2 for p in range(0, 201)]

        result = calculate_percentiles(scores, requested)
        values = [result[float(p)] for p in requested]

        assert values == sorted(values)
        assert values[0] == min(scores)
        assert values[-1] == max(scores)

    def test_input_order_does_not_matter(self):
        assert calculate_percentiles([3, 1, 2], [50]) == calculate_percentiles([1, 2, 3], [50])


class TestCalculatePercentile:
    def test_empty_sorted_list_is_zero(self):
        assert calculate_percentile([], 50) == 0.0

    def test_position_is_clamped(self):
        assert calculate_percentile([1.0, 2.0, 3.0], 150) == 3.0
        assert calculate_percentile([1.0, 2.0, 3.0], -10) == 1.0
