from compass_badges.schemas.badge import (
    AxisProgressSchema,
    AxisScoreResultSchema,
    BadgeProgressSchema,
    BadgeSchema,
    BadgeTierProgressSchema,
    CalculateBadgeScoresRequest,
    FinalizeSessionResultSchema,
    UserBadgeSchema,
)
from compass_badges.schemas.scenario import (
    BranchSchema,
    CompassChangeSchema,
    ContentBundleSchema,
    ScenarioSchema,
    SceneSchema,
)
from compass_badges.schemas.session import (
    GameSessionSchema,
    PlayerScenarioScoreSchema,
    SessionChoiceSchema,
    UserProfileSchema,
)

__all__ = [
    "AxisProgressSchema",
    "AxisScoreResultSchema",
    "BadgeProgressSchema",
    "BadgeSchema",
    "BadgeTierProgressSchema",
    "BranchSchema",
    "CalculateBadgeScoresRequest",
    "CompassChangeSchema",
    "ContentBundleSchema",
    "FinalizeSessionResultSchema",
    "GameSessionSchema",
    "PlayerScenarioScoreSchema",
    "ScenarioSchema",
    "SceneSchema",
    "SessionChoiceSchema",
    "UserBadgeSchema",
    "UserProfileSchema",
]
