"""Create news_items table

Revision ID: create_news_items
Revises:
Create Date: 2011-11-06 00:36:32.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'create_news_items'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'news_items',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False, comment='Generated identifier'),
        sa.Column('name', sa.String(length=255), nullable=True, comment='Headline'),
        sa.Column('body', sa.Text(), nullable=True, comment='Article text'),
        sa.Column('created_at', sa.DateTime(), nullable=False, comment='Insertion time (naive UTC)'),
        sa.Column('updated_at', sa.DateTime(), nullable=False, comment='Last successful mutation (naive UTC)'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_news_items_created_at', 'news_items', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_news_items_created_at', table_name='news_items')
    op.drop_table('news_items')
