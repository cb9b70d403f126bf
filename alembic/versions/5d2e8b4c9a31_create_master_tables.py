"""create master tables

Bilingual reference data: states, cities, skills, qualifications, shifts,
job profiles, business categories, work natures, experiences, distances.

Every table carries sequence / is_active; all except states and cities are
soft-deleted via deleted_at.

Revision ID: 5d2e8b4c9a31
Revises: 3f1a9c2e7b10
Create Date: 2025-11-22 10:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5d2e8b4c9a31'
down_revision = '3f1a9c2e7b10'
branch_labels = None
depends_on = None


def _sequenced_columns(soft_delete=True):
    """id / sequence / is_active / timestamps shared by every master table"""
    columns = [
        sa.Column('sequence', sa.Integer(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]
    if soft_delete:
        columns.append(sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True))
    return columns


def _create_master(table_name, *columns, soft_delete=True):
    op.create_table(
        table_name,
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        *columns,
        *_sequenced_columns(soft_delete),
    )
    op.create_index(op.f(f'ix_{table_name}_id'), table_name, ['id'], unique=False)
    op.create_index(op.f(f'ix_{table_name}_sequence'), table_name, ['sequence'], unique=False)


def _drop_master(table_name):
    op.drop_index(op.f(f'ix_{table_name}_sequence'), table_name=table_name)
    op.drop_index(op.f(f'ix_{table_name}_id'), table_name=table_name)
    op.drop_table(table_name)


def upgrade():
    _create_master(
        'states',
        sa.Column('state_english', sa.String(), nullable=False),
        sa.Column('state_hindi', sa.String(), nullable=False),
        soft_delete=False,
    )
    _create_master(
        'cities',
        sa.Column('state_id', sa.Integer(), sa.ForeignKey('states.id', ondelete='CASCADE'), nullable=False),
        sa.Column('city_english', sa.String(), nullable=False),
        sa.Column('city_hindi', sa.String(), nullable=False),
        soft_delete=False,
    )
    op.create_index(op.f('ix_cities_state_id'), 'cities', ['state_id'], unique=False)

    _create_master(
        'skills',
        sa.Column('skill_english', sa.String(), nullable=False),
        sa.Column('skill_hindi', sa.String(), nullable=False),
    )
    _create_master(
        'qualifications',
        sa.Column('qualification_english', sa.String(), nullable=False),
        sa.Column('qualification_hindi', sa.String(), nullable=False),
    )
    _create_master(
        'shifts',
        sa.Column('shift_english', sa.String(), nullable=False),
        sa.Column('shift_hindi', sa.String(), nullable=False),
        sa.Column('shift_from', sa.Time(), nullable=False),
        sa.Column('shift_to', sa.Time(), nullable=False),
    )
    _create_master(
        'job_profiles',
        sa.Column('profile_english', sa.String(150), nullable=True),
        sa.Column('profile_hindi', sa.String(150), nullable=True),
        sa.Column('profile_image', sa.String(255), nullable=True),
    )
    _create_master(
        'business_categories',
        sa.Column('category_english', sa.String(), nullable=False),
        sa.Column('category_hindi', sa.String(), nullable=False),
    )
    _create_master(
        'work_natures',
        sa.Column('nature_english', sa.String(), nullable=False),
        sa.Column('nature_hindi', sa.String(), nullable=False),
    )
    _create_master(
        'experiences',
        sa.Column('title_english', sa.String(), nullable=False),
        sa.Column('title_hindi', sa.String(), nullable=False),
        sa.Column('exp_from', sa.Integer(), nullable=False),
        sa.Column('exp_to', sa.Integer(), nullable=False),
    )
    _create_master(
        'distances',
        sa.Column('title_english', sa.String(), nullable=False),
        sa.Column('title_hindi', sa.String(), nullable=False),
        sa.Column('distance', sa.Numeric(10, 2), nullable=False),
    )


def downgrade():
    for table_name in (
        'distances',
        'experiences',
        'work_natures',
        'business_categories',
        'job_profiles',
        'shifts',
        'qualifications',
        'skills',
    ):
        _drop_master(table_name)

    op.drop_index(op.f('ix_cities_state_id'), table_name='cities')
    _drop_master('cities')
    _drop_master('states')
