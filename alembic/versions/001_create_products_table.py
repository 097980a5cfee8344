"""Create products table.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CATEGORIES = (
    'electronics', 'laptops', 'smartphones', 'tablets', 'headphones',
    'cameras', 'gaming', 'accessories', 'home', 'kitchen', 'books',
    'fashion', 'sports', 'health', 'beauty', 'toys', 'automotive',
)

# Weighted document: name A, brand B, tags C, description D
SEARCH_DOCUMENT = (
    "setweight(to_tsvector('english', coalesce(name, '')), 'A') || "
    "setweight(to_tsvector('english', coalesce(brand, '')), 'B') || "
    "setweight(to_tsvector('english', coalesce(CAST(tags AS TEXT), '')), 'C') || "
    "setweight(to_tsvector('english', coalesce(description, '')), 'D')"
)


def upgrade() -> None:
    """Create products table with filter, sort and full-text indexes."""
    op.create_table(
        'products',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('original_price', sa.Numeric(10, 2), nullable=True),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('subcategory', sa.String(100), nullable=True),
        sa.Column('brand', sa.String(100), nullable=False),
        sa.Column('model', sa.String(100), nullable=True),
        sa.Column('rating', sa.Numeric(2, 1), nullable=False, server_default='0.0'),
        sa.Column('review_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('specifications', postgresql.JSON(), nullable=False, server_default='{}'),
        sa.Column('images', postgresql.JSON(), nullable=False, server_default='[]'),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('in_stock', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_on_sale', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('slug', sa.String(250), nullable=False),
        sa.Column('tags', postgresql.JSON(), nullable=False, server_default='[]'),
        sa.Column('created_by', sa.String(100), nullable=False, server_default='system'),
        sa.Column('updated_by', sa.String(100), nullable=False, server_default='system'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.CheckConstraint('price >= 0', name='ck_products_price_non_negative'),
        sa.CheckConstraint(
            'original_price IS NULL OR original_price >= 0',
            name='ck_products_original_price_non_negative',
        ),
        sa.CheckConstraint('rating >= 0 AND rating <= 5', name='ck_products_rating_range'),
        sa.CheckConstraint('review_count >= 0', name='ck_products_review_count_non_negative'),
        sa.CheckConstraint('stock >= 0', name='ck_products_stock_non_negative'),
        sa.CheckConstraint(
            'category IN ({})'.format(', '.join(f"'{c}'" for c in CATEGORIES)),
            name='ck_products_category',
        ),
        sa.UniqueConstraint('slug', name='uq_products_slug'),
    )

    op.create_index('ix_products_name', 'products', ['name'])
    op.create_index('ix_products_category', 'products', ['category'])
    op.create_index('ix_products_price', 'products', ['price'])
    op.create_index('ix_products_rating', 'products', ['rating'])
    op.create_index('ix_products_brand', 'products', ['brand'])
    op.create_index('ix_products_active_in_stock', 'products', ['is_active', 'in_stock'])

    op.create_index(
        'ix_products_search_document',
        'products',
        [sa.text(f'({SEARCH_DOCUMENT})')],
        postgresql_using='gin',
    )


def downgrade() -> None:
    """Drop products table."""
    op.drop_index('ix_products_search_document', table_name='products')
    op.drop_index('ix_products_active_in_stock', table_name='products')
    op.drop_index('ix_products_brand', table_name='products')
    op.drop_index('ix_products_rating', table_name='products')
    op.drop_index('ix_products_price', table_name='products')
    op.drop_index('ix_products_category', table_name='products')
    op.drop_index('ix_products_name', table_name='products')
    op.drop_table('products')
