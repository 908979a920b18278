"""add indexes for jobs filtering

Revision ID: 5c9e2d41a8b3
Revises: 3a1f0c2b7d10
Create Date: 2025-10-16 18:20:37.827291

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c9e2d41a8b3'
down_revision: Union[str, None] = '3a1f0c2b7d10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

def upgrade():
    # board loads by (user, status), table and list by (user, newest first)
    op.create_index(
        "ix_jobs_user_status_created_at",
        "jobs",
        ["user_id", "status", "created_at"],
        unique=False,
    )
    op.create_index(
        "ix_jobs_user_created_at",
        "jobs",
        ["user_id", "created_at"],
        unique=False,
    )

def downgrade():
    op.drop_index("ix_jobs_user_created_at", table_name="jobs")
    op.drop_index("ix_jobs_user_status_created_at", table_name="jobs")
