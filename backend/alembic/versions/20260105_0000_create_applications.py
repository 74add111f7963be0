"""create_applications_table

Revision ID: 20260105_0000
Revises:
Create Date: 2026-01-05 00:00:00.000000+00:00

"""
from alembic import op
import sqlalchemy as sa

from jobtracker.database_types import GUID


revision = '20260105_0000'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'applications',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('company', sa.Text(), nullable=False),
        sa.Column('position', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='Applied'),
        sa.Column('date_applied', sa.DateTime(), nullable=False),
        sa.Column('job_url', sa.Text(), nullable=True),
        sa.Column('salary', sa.Text(), nullable=True),
        sa.Column('location', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "status IN ('Applied', 'Interview', 'Offered', 'Rejected', 'Ignored')",
            name='ck_applications_status'
        ),
    )
    op.create_index('idx_applications_date_applied', 'applications', ['date_applied'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_applications_date_applied', table_name='applications')
    op.drop_table('applications')
