"""add_job_application_indexes

Revision ID: 8d41b0c6e5f2
Revises: 3c9e1f2a7b44
Create Date: 2026-10-18 16:02:47.031556

"""
from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = '8d41b0c6e5f2'
down_revision: Union[str, None] = '3c9e1f2a7b44'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add the status and applied_date indexes used by list filters."""
    from sqlalchemy import inspect
    
    # Check which indexes already exist (idempotent migration)
    bind = op.get_bind()
    inspector = inspect(bind)
    indexes = [idx['name'] for idx in inspector.get_indexes('job_applications')]
    
    if 'ix_job_applications_status' not in indexes:
        op.create_index(op.f('ix_job_applications_status'), 'job_applications', ['status'], unique=False)
    
    if 'ix_job_applications_applied_date' not in indexes:
        op.create_index(op.f('ix_job_applications_applied_date'), 'job_applications', ['applied_date'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_job_applications_applied_date'), table_name='job_applications')
    op.drop_index(op.f('ix_job_applications_status'), table_name='job_applications')
