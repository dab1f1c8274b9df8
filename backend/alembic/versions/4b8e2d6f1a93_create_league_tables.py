"""create league tables

Revision ID: 4b8e2d6f1a93
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str | None = "4b8e2d6f1a93"
down_revision: str | None = None
branch_labels: str | None = None
depends_on: str | None = None


def upgrade() -> None:
    op.create_table(
        "teams",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tournament_id", sa.String(), nullable=False),
        sa.Column("team_number", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(), server_default="", nullable=False),
        sa.Column("city", sa.String(), nullable=True),
        sa.Column("phone_number", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tournament_id", "team_number"),
    )
    op.create_index(op.f("ix_teams_id"), "teams", ["id"], unique=False)
    op.create_index(op.f("ix_teams_tournament_id"), "teams", ["tournament_id"], unique=False)

    op.create_table(
        "games",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tournament_id", sa.String(), nullable=False),
        sa.Column("round", sa.Integer(), nullable=False),
        sa.Column("table_number", sa.Integer(), nullable=True),
        sa.Column("team1_id", sa.String(), nullable=False),
        sa.Column("team2_id", sa.String(), nullable=False),
        sa.Column("score1", sa.Integer(), nullable=True),
        sa.Column("score2", sa.Integer(), nullable=True),
        sa.Column("hands1", sa.Integer(), nullable=True),
        sa.Column("hands2", sa.Integer(), nullable=True),
        sa.Column("boston", sa.String(), server_default="NONE", nullable=False),
        sa.Column("confirmed", sa.Boolean(), server_default="f", nullable=False),
        sa.Column("submitted_by", sa.String(), nullable=True),
        sa.Column("confirmed_by", sa.String(), nullable=True),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.ForeignKeyConstraint(["team1_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["team2_id"], ["teams.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["submitted_by"], ["teams.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["confirmed_by"], ["teams.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_games_id"), "games", ["id"], unique=False)
    op.create_index(op.f("ix_games_round"), "games", ["round"], unique=False)
    op.create_index(op.f("ix_games_tournament_id"), "games", ["tournament_id"], unique=False)

    op.create_table(
        "schedules",
        sa.Column("tournament_id", sa.String(), nullable=False),
        sa.Column("rounds", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("tournament_id"),
    )
    op.create_index(op.f("ix_schedules_tournament_id"), "schedules", ["tournament_id"], unique=False)

    op.create_table(
        "result_overrides",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("tournament_id", sa.String(), nullable=False),
        sa.Column("key", sa.String(), nullable=False),
        sa.Column("value", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tournament_id", "key"),
    )
    op.create_index(op.f("ix_result_overrides_id"), "result_overrides", ["id"], unique=False)
    op.create_index(
        op.f("ix_result_overrides_tournament_id"), "result_overrides", ["tournament_id"], unique=False
    )

    op.create_table(
        "brackets",
        sa.Column("tournament_id", sa.String(), nullable=False),
        sa.Column("data", sa.JSON(), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.PrimaryKeyConstraint("tournament_id"),
    )
    op.create_index(op.f("ix_brackets_tournament_id"), "brackets", ["tournament_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_brackets_tournament_id"), table_name="brackets")
    op.drop_table("brackets")

    op.drop_index(op.f("ix_result_overrides_tournament_id"), table_name="result_overrides")
    op.drop_index(op.f("ix_result_overrides_id"), table_name="result_overrides")
    op.drop_table("result_overrides")

    op.drop_index(op.f("ix_schedules_tournament_id"), table_name="schedules")
    op.drop_table("schedules")

    op.drop_index(op.f("ix_games_tournament_id"), table_name="games")
    op.drop_index(op.f("ix_games_round"), table_name="games")
    op.drop_index(op.f("ix_games_id"), table_name="games")
    op.drop_table("games")

    op.drop_index(op.f("ix_teams_tournament_id"), table_name="teams")
    op.drop_index(op.f("ix_teams_id"), table_name="teams")
    op.drop_table("teams")
