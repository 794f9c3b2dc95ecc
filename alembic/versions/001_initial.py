"""Initial tables: scenarios, bundles, profiles, sessions, scores, badges.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "scenarios",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("scenes_json", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "content_bundles",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("scenario_ids_json", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "user_profiles",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("age_group", sa.String(32), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "game_sessions",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("profile_id", sa.String(64), nullable=False),
        sa.Column("scenario_id", sa.String(64), nullable=False),
        sa.Column("choices_json", sa.Text(), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["profile_id"], ["user_profiles.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_game_sessions_profile_id"), "game_sessions", ["profile_id"], unique=False)
    op.create_index(op.f("ix_game_sessions_scenario_id"), "game_sessions", ["scenario_id"], unique=False)

    op.create_table(
        "player_scenario_scores",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("profile_id", sa.String(64), nullable=False),
        sa.Column("scenario_id", sa.String(64), nullable=False),
        sa.Column("game_session_id", sa.String(64), nullable=False),
        sa.Column("axis_scores_json", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["profile_id"], ["user_profiles.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("profile_id", "scenario_id", name="uq_player_scenario_scores_profile_scenario"),
    )
    op.create_index(
        op.f("ix_player_scenario_scores_profile_id"), "player_scenario_scores", ["profile_id"], unique=False
    )

    op.create_table(
        "badges",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("age_group_id", sa.String(32), nullable=False),
        sa.Column("compass_axis_id", sa.String(64), nullable=False),
        sa.Column("tier", sa.String(32), nullable=False),
        sa.Column("tier_order", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("required_score", sa.Float(), nullable=False),
        sa.Column("image_id", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_badges_age_group_id"), "badges", ["age_group_id"], unique=False)

    op.create_table(
        "user_badges",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_profile_id", sa.String(64), nullable=False),
        sa.Column("badge_id", sa.String(64), nullable=False),
        sa.Column("badge_name", sa.String(255), nullable=False),
        sa.Column("axis", sa.String(64), nullable=False),
        sa.Column("trigger_value", sa.Float(), nullable=False),
        sa.Column("threshold", sa.Float(), nullable=False),
        sa.Column("earned_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("image_id", sa.String(255), nullable=True),
        sa.ForeignKeyConstraint(["user_profile_id"], ["user_profiles.id"]),
        sa.ForeignKeyConstraint(["badge_id"], ["badges.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_profile_id", "badge_id", name="uq_user_badges_profile_badge"),
    )
    op.create_index(op.f("ix_user_badges_user_profile_id"), "user_badges", ["user_profile_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_user_badges_user_profile_id"), table_name="user_badges")
    op.drop_table("user_badges")
    op.drop_index(op.f("ix_badges_age_group_id"), table_name="badges")
    op.drop_table("badges")
    op.drop_index(op.f("ix_player_scenario_scores_profile_id"), table_name="player_scenario_scores")
    op.drop_table("player_scenario_scores")
    op.drop_index(op.f("ix_game_sessions_scenario_id"), table_name="game_sessions")
    op.drop_index(op.f("ix_game_sessions_profile_id"), table_name="game_sessions")
    op.drop_table("game_sessions")
    op.drop_table("user_profiles")
    op.drop_table("content_bundles")
    op.drop_table("scenarios")
