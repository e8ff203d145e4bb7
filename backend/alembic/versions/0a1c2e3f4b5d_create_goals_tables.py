"""create goals and achieved_goals tables

Revision ID: 0a1c2e3f4b5d
Revises:
Create Date: 2026-10-12 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0a1c2e3f4b5d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'goals',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('desired_weekly_frequency', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_goals_id', 'goals', ['id'])

    op.create_table(
        'achieved_goals',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('goal_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.ForeignKeyConstraint(['goal_id'], ['goals.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_achieved_goals_id', 'achieved_goals', ['id'])
    op.create_index('ix_achieved_goals_goal_id', 'achieved_goals', ['goal_id'])
    op.create_index('ix_achieved_goals_created_at', 'achieved_goals', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_achieved_goals_created_at', table_name='achieved_goals')
    op.drop_index('ix_achieved_goals_goal_id', table_name='achieved_goals')
    op.drop_index('ix_achieved_goals_id', table_name='achieved_goals')
    op.drop_table('achieved_goals')
    op.drop_index('ix_goals_id', table_name='goals')
    op.drop_table('goals')
