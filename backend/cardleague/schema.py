from sqlalchemy import Column, ForeignKey, Integer, String, Table, UniqueConstraint, func
from sqlalchemy.orm import declarative_base  # type: ignore[attr-defined]
from sqlalchemy.sql.sqltypes import JSON, BigInteger, Boolean, DateTime

Base = declarative_base()
metadata = Base.metadata
DateTimeTZ = DateTime(timezone=True)

teams = Table(
    "teams",
    metadata,
    Column("id", String, primary_key=True, index=True),
    Column("tournament_id", String, nullable=False, index=True),
    Column("team_number", Integer, nullable=True),
    Column("name", String, nullable=False, server_default=""),
    Column("city", String, nullable=True),
    Column("phone_number", String, nullable=True),
    Column("email", String, nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    UniqueConstraint("tournament_id", "team_number"),
)

games = Table(
    "games",
    metadata,
    Column("id", String, primary_key=True, index=True),
    Column("tournament_id", String, nullable=False, index=True),
    Column("round", Integer, nullable=False, index=True),
    Column("table_number", Integer, nullable=True),
    Column("team1_id", String, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False),
    Column("team2_id", String, ForeignKey("teams.id", ondelete="CASCADE"), nullable=False),
    Column("score1", Integer, nullable=True),
    Column("score2", Integer, nullable=True),
    Column("hands1", Integer, nullable=True),
    Column("hands2", Integer, nullable=True),
    Column("boston", String, nullable=False, server_default="NONE"),
    Column("confirmed", Boolean, nullable=False, server_default="f"),
    Column("submitted_by", String, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True),
    Column("confirmed_by", String, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)

schedules = Table(
    "schedules",
    metadata,
    Column("tournament_id", String, primary_key=True, index=True),
    Column("rounds", Integer, nullable=False),
)

result_overrides = Table(
    "result_overrides",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True, autoincrement=True),
    Column("tournament_id", String, nullable=False, index=True),
    Column("key", String, nullable=False),
    Column("value", JSON, nullable=False),
    UniqueConstraint("tournament_id", "key"),
)

brackets = Table(
    "brackets",
    metadata,
    Column("tournament_id", String, primary_key=True, index=True),
    Column("data", JSON, nullable=False),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)
