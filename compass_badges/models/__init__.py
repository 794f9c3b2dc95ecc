from compass_badges.models.badge import Badge, UserBadge
from compass_badges.models.profile import UserProfile
from compass_badges.models.scenario import ContentBundle, Scenario
from compass_badges.models.score import PlayerScenarioScore
from compass_badges.models.session import GameSession

__all__ = [
    "Badge",
    "ContentBundle",
    "GameSession",
    "PlayerScenarioScore",
    "Scenario",
    "UserBadge",
    "UserProfile",
]
