"""add exp_type to experiences

Experience brackets can now be expressed in months as well as years.
Existing rows are years.

Revision ID: 8a4f6e1b3c72
Revises: 5d2e8b4c9a31
Create Date: 2025-12-21 00:10:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8a4f6e1b3c72'
down_revision = '5d2e8b4c9a31'
branch_labels = None
depends_on = None

experience_unit = sa.Enum('month', 'year', name='experience_unit')


def upgrade():
    experience_unit.create(op.get_bind(), checkfirst=True)
    op.add_column(
        'experiences',
        sa.Column('exp_type', experience_unit, nullable=False, server_default='year')
    )


def downgrade():
    op.drop_column('experiences', 'exp_type')
    experience_unit.drop(op.get_bind(), checkfirst=True)
