"""Create games table

Revision ID: 9f2c1d7a4b3e
Revises:
Create Date: 2026-10-19 09:12:31.204518
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '9f2c1d7a4b3e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'games',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('publisher_id', sa.String(), nullable=True),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('platform', sa.String(), nullable=True),
        sa.Column('store_id', sa.String(), nullable=True),
        sa.Column('bundle_id', sa.String(), nullable=True),
        sa.Column('app_version', sa.String(), nullable=True),
        sa.Column('is_published', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_games_name', 'games', ['name'])
    op.create_index('ix_games_platform', 'games', ['platform'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_games_platform', table_name='games')
    op.drop_index('ix_games_name', table_name='games')
    op.drop_table('games')
