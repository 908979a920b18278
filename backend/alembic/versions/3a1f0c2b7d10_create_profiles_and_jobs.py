"""create profiles and jobs

Revision ID: 3a1f0c2b7d10
Revises:
Create Date: 2025-10-14 09:12:41.503117

"""
from typing import Sequence, Union
import os

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a1f0c2b7d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

AUTH_SCHEMA = os.getenv("AUTH_SCHEMA", "auth") or None

JOB_STATUSES = (
    "APPLYING", "APPLIED", "FOR_INTERVIEW", "INTERVIEWING", "OFFER", "NEGOTIATING",
    "HIRED", "ON_HOLD", "REJECTED", "NO_RESPONSE", "WITHDRAW",
)


def upgrade():
    auth_users = f"{AUTH_SCHEMA}.users.id" if AUTH_SCHEMA else "users.id"

    op.create_table(
        'profiles',
        sa.Column('id', sa.Uuid(), sa.ForeignKey(auth_users, ondelete='CASCADE'), primary_key=True),
        sa.Column('display_name', sa.String(), nullable=True),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'jobs',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('company', sa.String(), nullable=False),
        sa.Column('position', sa.String(), nullable=False),
        sa.Column('status', sa.Enum(*JOB_STATUSES, name='job_status'), server_default='APPLYING', nullable=False),
        sa.Column('url', sa.Text()),
        sa.Column('salary', sa.String()),
        sa.Column('job_description', sa.Text()),
        sa.Column('note', sa.Text()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_jobs_user_id', 'jobs', ['user_id'])


def downgrade():
    op.drop_index('ix_jobs_user_id', table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('profiles')
    sa.Enum(name='job_status').drop(op.get_bind(), checkfirst=True)
