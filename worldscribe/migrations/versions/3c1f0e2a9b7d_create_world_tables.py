"""create world tables

Revision ID: 3c1f0e2a9b7d
Revises:
Create Date: 2024-03-02 18:41:09.118532

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0e2a9b7d'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('icon', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('name', name='uq_categories_name'),
    )
    op.create_table(
        'fields',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id'), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        'articles',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id'), nullable=False),
        sa.Column('image', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'field_values',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('value', sa.Text(), nullable=False, server_default=''),
        sa.Column('field_id', sa.Integer(), sa.ForeignKey('fields.id'), nullable=False),
        sa.Column('article_id', sa.Integer(), sa.ForeignKey('articles.id'), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('field_id', 'article_id', name='uq_field_values_field_article'),
    )
    op.create_table(
        'connection_descriptions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        *_timestamps(),
    )
    op.create_table(
        'connections',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('main_article_id', sa.Integer(), sa.ForeignKey('articles.id'), nullable=False),
        sa.Column('other_article_id', sa.Integer(), sa.ForeignKey('articles.id'), nullable=False),
        sa.Column('other_article_role', sa.Text(), nullable=False, server_default=''),
        sa.Column('connection_description_id', sa.Integer(), sa.ForeignKey('connection_descriptions.id'), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        'snippets',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        sa.Column('article_id', sa.Integer(), sa.ForeignKey('articles.id'), nullable=False),
        *_timestamps(),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('snippets')
    op.drop_table('connections')
    op.drop_table('connection_descriptions')
    op.drop_table('field_values')
    op.drop_table('articles')
    op.drop_table('fields')
    op.drop_table('categories')
