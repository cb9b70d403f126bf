"""create subscription catalogue

Employee plans, employer plans and the benefits advertised on them.
All three are display-ordered by `sequence` and soft-deleted via `deleted_at`.

Revision ID: 3f1a9c2e7b10
Revises:
Create Date: 2025-11-22 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1a9c2e7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'employee_subscription_plans',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('plan_name_english', sa.String(), nullable=False),
        sa.Column('plan_name_hindi', sa.String(), nullable=True),
        sa.Column('plan_validity_days', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('plan_tagline_english', sa.String(), nullable=True),
        sa.Column('plan_tagline_hindi', sa.String(), nullable=True),
        sa.Column('plan_price', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('contact_credits', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('interest_credits', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('sequence', sa.Integer(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(op.f('ix_employee_subscription_plans_id'), 'employee_subscription_plans', ['id'], unique=False)
    op.create_index(op.f('ix_employee_subscription_plans_sequence'), 'employee_subscription_plans', ['sequence'], unique=False)

    op.create_table(
        'employer_subscription_plans',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('plan_name_english', sa.String(), nullable=False),
        sa.Column('plan_name_hindi', sa.String(), nullable=True),
        sa.Column('plan_validity_days', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('plan_tagline_english', sa.String(), nullable=True),
        sa.Column('plan_tagline_hindi', sa.String(), nullable=True),
        sa.Column('plan_price', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('contact_credits', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('interest_credits', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('ad_credits', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sequence', sa.Integer(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(op.f('ix_employer_subscription_plans_id'), 'employer_subscription_plans', ['id'], unique=False)
    op.create_index(op.f('ix_employer_subscription_plans_sequence'), 'employer_subscription_plans', ['sequence'], unique=False)

    # plan_id points at either plans table depending on subscription_type, so no FK
    op.create_table(
        'plan_benefits',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('subscription_type', sa.Enum('employee', 'employer', name='plan_subscription_type'), nullable=False),
        sa.Column('plan_id', sa.Integer(), nullable=False),
        sa.Column('benefit_english', sa.String(), nullable=False),
        sa.Column('benefit_hindi', sa.String(), nullable=True),
        sa.Column('sequence', sa.Integer(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(op.f('ix_plan_benefits_id'), 'plan_benefits', ['id'], unique=False)
    op.create_index(op.f('ix_plan_benefits_sequence'), 'plan_benefits', ['sequence'], unique=False)
    op.create_index(op.f('ix_plan_benefits_subscription_type'), 'plan_benefits', ['subscription_type'], unique=False)
    op.create_index(op.f('ix_plan_benefits_plan_id'), 'plan_benefits', ['plan_id'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_plan_benefits_plan_id'), table_name='plan_benefits')
    op.drop_index(op.f('ix_plan_benefits_subscription_type'), table_name='plan_benefits')
    op.drop_index(op.f('ix_plan_benefits_sequence'), table_name='plan_benefits')
    op.drop_index(op.f('ix_plan_benefits_id'), table_name='plan_benefits')
    op.drop_table('plan_benefits')
    sa.Enum(name='plan_subscription_type').drop(op.get_bind(), checkfirst=True)

    op.drop_index(op.f('ix_employer_subscription_plans_sequence'), table_name='employer_subscription_plans')
    op.drop_index(op.f('ix_employer_subscription_plans_id'), table_name='employer_subscription_plans')
    op.drop_table('employer_subscription_plans')

    op.drop_index(op.f('ix_employee_subscription_plans_sequence'), table_name='employee_subscription_plans')
    op.drop_index(op.f('ix_employee_subscription_plans_id'), table_name='employee_subscription_plans')
    op.drop_table('employee_subscription_plans')
