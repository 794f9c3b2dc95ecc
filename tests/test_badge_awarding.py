"""Tests for tiered badge awarding."""

import pytest

from compass_badges.schemas.session import UserProfileSchema
from compass_badges.services.badge_awarding import award_badges, qualifying_badges, resolve_age_group
from tests.factories import add_badge, add_honesty_tiers, add_profile

PROFILE = UserProfileSchema(id="profile-1", name="Robin", age_group="school")


class TestAwardBadges:
    @pytest.mark.asyncio
    async def test_multi_tier_catch_up(self, db, repos):
        await add_profile(db)
        await add_honesty_tiers(db, (10, 25, 50))

        awarded = await award_badges(PROFILE, {"honesty": 60}, repos.badges, repos.user_badges)

        assert [b.badge_id for b in awarded] == ["honesty-bronze", "honesty-silver", "honesty-gold"]
        assert all(b.trigger_value == 60 for b in awarded)
        assert [b.threshold for b in awarded] == [10, 25, 50]

    @pytest.mark.asyncio
    async def test_only_reached_tiers(self, db, repos):
        await add_profile(db)
        await add_honesty_tiers(db, (10, 25, 50))

        awarded = await award_badges(PROFILE, {"honesty": 25}, repos.badges, repos.user_badges)

        assert [b.badge_id for b in awarded] == ["honesty-bronze", "honesty-silver"]

    @pytest.mark.asyncio
    async def test_awarding_is_idempotent(self, db, repos):
        await add_profile(db)
        await add_honesty_tiers(db, (10, 25, 50))

        first = await award_badges(PROFILE, {"honesty": 30}, repos.badges, repos.user_badges)
        second = await award_badges(PROFILE, {"honesty": 30}, repos.badges, repos.user_badges)

        assert len(first) == 2
        assert second == []
        held = await repos.user_badges.get_by_user_profile_id("profile-1")
        assert sorted(b.badge_id for b in held) == ["honesty-bronze", "honesty-silver"]

    @pytest.mark.asyncio
    async def test_badges_are_never_revoked(self, db, repos):
        await add_profile(db)
        await add_honesty_tiers(db, (10, 25, 50))
        await award_badges(PROFILE, {"honesty": 30}, repos.badges, repos.user_badges)

        awarded = await award_badges(PROFILE, {"honesty": -5}, repos.badges, repos.user_badges)

        assert awarded == []
        assert len(await repos.user_badges.get_by_user_profile_id("profile-1")) == 2

    @pytest.mark.asyncio
    async def test_axis_matching_ignores_case(self, db, repos):
        await add_profile(db)
        await add_honesty_tiers(db, (10, 25, 50))

        awarded = await award_badges(PROFILE, {"HONESTY": 12}, repos.badges, repos.user_badges)

        assert [b.badge_id for b in awarded] == ["honesty-bronze"]
        assert awarded[0].axis == "honesty"

    @pytest.mark.asyncio
    async def test_spellings_of_one_axis_are_summed(self, db, repos):
        await add_profile(db)
        await add_honesty_tiers(db, (10, 25, 50))

        awarded = await award_badges(PROFILE, {"Honesty": 30, "honesty": 30}, repos.badges, repos.user_badges)

        assert [b.badge_id for b in awarded] == ["honesty-bronze", "honesty-silver", "honesty-gold"]
        assert awarded[-1].trigger_value == 60

    @pytest.mark.asyncio
    async def test_blank_axis_in_scores_is_ignored(self, db, repos):
        await add_profile(db)
        await add_honesty_tiers(db, (10, 25, 50))

        awarded = await award_badges(PROFILE, {"honesty": 12, "": 1.0, "  ": 5}, repos.badges, repos.user_badges)

        assert [b.badge_id for b in awarded] == ["honesty-bronze"]

    @pytest.mark.asyncio
    async def test_axes_without_score_are_skipped(self, db, repos):
        await add_profile(db)
        await add_honesty_tiers(db, (10, 25, 50))
        await add_badge(db, "bravery-bronze", "bravery", "bronze", 1, 1)

        awarded = await award_badges(PROFILE, {"bravery": 3}, repos.badges, repos.user_badges)

        assert [b.badge_id for b in awarded] == ["bravery-bronze"]

    @pytest.mark.asyncio
    async def test_unknown_age_group_awards_nothing(self, db, repos):
        await add_profile(db, age_group="martians")
        await add_honesty_tiers(db, (10, 25, 50))
        profile = UserProfileSchema(id="profile-1", age_group="martians")

        assert await award_badges(profile, {"honesty": 100}, repos.badges, repos.user_badges) == []

    @pytest.mark.asyncio
    async def test_blank_age_group_uses_default_catalog(self, db, repos):
        await add_profile(db, age_group=None)
        await add_honesty_tiers(db, (10, 25, 50), age_group="school")
        profile = UserProfileSchema(id="profile-1", age_group=None)

        awarded = await award_badges(profile, {"honesty": 10}, repos.badges, repos.user_badges)

        assert [b.badge_id for b in awarded] == ["honesty-bronze"]

    @pytest.mark.asyncio
    async def test_thresholds_checked_per_tier_not_by_order(self, db, repos):
        """A lower tier with a higher threshold does not block later tiers."""
        await add_profile(db)
        await add_badge(db, "odd-first", "honesty", "bronze", 1, 50)
        await add_badge(db, "odd-second", "honesty", "silver", 2, 10)

        awarded = await award_badges(PROFILE, {"honesty": 20}, repos.badges, repos.user_badges)

        assert [b.badge_id for b in awarded] == ["odd-second"]

    @pytest.mark.asyncio
    async def test_concurrent_award_is_skipped(self, db, repos, monkeypatch):
        await add_profile(db)
        await add_honesty_tiers(db, (10, 25, 50))
        await award_badges(PROFILE, {"honesty": 12}, repos.badges, repos.user_badges)

        async def nothing_held(profile_id):
            return []

        monkeypatch.setattr(repos.user_badges, "get_by_user_profile_id", nothing_held)

        awarded = await award_badges(PROFILE, {"honesty": 30}, repos.badges, repos.user_badges)

        # bronze hits the unique constraint, silver is new
        assert [b.badge_id for b in awarded] == ["honesty-silver"]


def test_qualifying_badges_keeps_tier_order():
    from compass_badges.schemas.badge import BadgeSchema

    tiers = [
        BadgeSchema(id=f"b{i}", age_group_id="school", compass_axis_id="x", tier=t, tier_order=i, required_score=s)
        for i, (t, s) in enumerate([("bronze", 1), ("silver", 5), ("gold", 9)])
    ]

    assert [b.id for b in qualifying_badges(tiers, 5)] == ["b0", "b1"]


def test_resolve_age_group_falls_back_to_settings(monkeypatch):
    monkeypatch.setenv("COMPASS_DEFAULT_AGE_GROUP", "preteens")

    assert resolve_age_group(UserProfileSchema(id="p", age_group="  ")) == "preteens"
    assert resolve_age_group(UserProfileSchema(id="p", age_group="teens")) == "teens"
