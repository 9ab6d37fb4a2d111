"""Learners table with per-query secondary indexes.

Revision ID: 001_learners
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_learners"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CAMPUSES = (
    "Remote", "Boston", "New York", "Denver", "Los Angeles", "Seattle", "Dallas",
)


def upgrade() -> None:
    op.create_table(
        "learners",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("enrolled", sa.Boolean, nullable=False),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("avg", sa.Float, nullable=True),
        sa.Column(
            "campus", sa.String(20), nullable=False, server_default="Remote",
        ),
        sa.CheckConstraint("year >= 1995", name="ck_learners_min_year"),
        sa.CheckConstraint(
            "campus IN ({})".format(", ".join(f"'{c}'" for c in CAMPUSES)),
            name="ck_learners_campus",
        ),
    )
    for column in ("name", "year", "avg", "campus"):
        op.create_index(f"ix_learners_{column}", "learners", [column])


def downgrade() -> None:
    for column in ("campus", "avg", "year", "name"):
        op.drop_index(f"ix_learners_{column}", table_name="learners")
    op.drop_table("learners")
