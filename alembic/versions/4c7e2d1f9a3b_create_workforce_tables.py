"""create_workforce_tables

Creates departments, locations, jobs and user_info.

Jobs reference locations and departments with ON DELETE RESTRICT so a parent
row cannot be removed while a job points at it. Every table carries a
`version` column used as the optimistic concurrency token.

Revision ID: 4c7e2d1f9a3b
Revises:
Create Date: 2026-10-19 09:30:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c7e2d1f9a3b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the four application tables."""
    op.create_table(
        'departments',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_index('ix_departments_id', 'departments', ['id'])

    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('city', sa.String(), nullable=True),
        sa.Column('state', sa.String(), nullable=True),
        sa.Column('country', sa.String(), nullable=True),
        sa.Column('zip', sa.String(), nullable=True),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_index('ix_locations_id', 'locations', ['id'])

    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('code', sa.String(), nullable=False),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.Column('department_id', sa.Integer(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['department_id'], ['departments.id'], ondelete='RESTRICT'),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_code', 'jobs', ['code'], unique=True)
    op.create_index('ix_jobs_location_id', 'jobs', ['location_id'])
    op.create_index('ix_jobs_department_id', 'jobs', ['department_id'])

    op.create_table(
        'user_info',
        sa.Column('user_id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('role', sa.String(), nullable=False, server_default='User'),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_index('ix_user_info_user_id', 'user_info', ['user_id'])
    op.create_index('ix_user_info_email', 'user_info', ['email'], unique=True)


def downgrade() -> None:
    """Drop the application tables, children first."""
    op.drop_index('ix_user_info_email', table_name='user_info')
    op.drop_index('ix_user_info_user_id', table_name='user_info')
    op.drop_table('user_info')

    op.drop_index('ix_jobs_department_id', table_name='jobs')
    op.drop_index('ix_jobs_location_id', table_name='jobs')
    op.drop_index('ix_jobs_code', table_name='jobs')
    op.drop_index('ix_jobs_id', table_name='jobs')
    op.drop_table('jobs')

    op.drop_index('ix_locations_id', table_name='locations')
    op.drop_table('locations')

    op.drop_index('ix_departments_id', table_name='departments')
    op.drop_table('departments')
