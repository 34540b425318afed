"""create_job_applications

Revision ID: 3c9e1f2a7b44
Revises: 
Create Date: 2026-10-18 15:40:12.418920

Creates the job_applications table if it does not exist yet.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3c9e1f2a7b44'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def table_exists(table_name: str) -> bool:
    """Check if a table exists in the database."""
    bind = op.get_bind()
    inspector = inspect(bind)
    return table_name in inspector.get_table_names()


def upgrade() -> None:
    if not table_exists('job_applications'):
        op.create_table('job_applications',
            sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
            sa.Column('company', sa.String(), nullable=False),
            sa.Column('position', sa.String(), nullable=False),
            sa.Column('location', sa.String(), nullable=True),
            sa.Column('status', sa.String(length=16), nullable=False),
            sa.Column('interview_round', sa.Integer(), nullable=True),
            sa.Column('offer_amount', sa.Numeric(precision=12, scale=2), nullable=True),
            sa.Column('applied_date', sa.Date(), nullable=False),
            sa.Column('resume_path', sa.String(), nullable=True),
            sa.Column('salary_expectation', sa.Numeric(precision=12, scale=2), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )


def downgrade() -> None:
    op.drop_table('job_applications')
