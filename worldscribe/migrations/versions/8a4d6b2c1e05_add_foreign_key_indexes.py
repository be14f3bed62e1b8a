"""add foreign key and listing indexes

Revision ID: 8a4d6b2c1e05
Revises: 3c1f0e2a9b7d
Create Date: 2024-03-09 10:02:44.530871

"""
from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = '8a4d6b2c1e05'
down_revision: Union[str, None] = '3c1f0e2a9b7d'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_index('idx_fields_category_id', 'fields', ['category_id'], unique=False)
    op.create_index('idx_articles_category_id', 'articles', ['category_id'], unique=False)
    op.create_index('idx_articles_name', 'articles', ['name'], unique=False)
    op.create_index('idx_field_values_article_id', 'field_values', ['article_id'], unique=False)
    op.create_index('idx_connections_main_article_id', 'connections', ['main_article_id'], unique=False)
    op.create_index('idx_connections_other_article_id', 'connections', ['other_article_id'], unique=False)
    op.create_index('idx_connections_description_id', 'connections', ['connection_description_id'], unique=False)
    op.create_index('idx_snippets_article_id', 'snippets', ['article_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_snippets_article_id', table_name='snippets')
    op.drop_index('idx_connections_description_id', table_name='connections')
    op.drop_index('idx_connections_other_article_id', table_name='connections')
    op.drop_index('idx_connections_main_article_id', table_name='connections')
    op.drop_index('idx_field_values_article_id', table_name='field_values')
    op.drop_index('idx_articles_name', table_name='articles')
    op.drop_index('idx_articles_category_id', table_name='articles')
    op.drop_index('idx_fields_category_id', table_name='fields')
