"""Initial schema for lijstje

Revision ID: 001_initial_schema
Revises:
Create Date: 2025-02-20 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Household categories (names unique per household by convention only)
    op.create_table(
        'product_categories',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('household_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.Text, nullable=False),
        sa.Column('display_order', sa.Integer, nullable=False, server_default='0'),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
    )
    op.create_index('idx_product_categories_household', 'product_categories', ['household_id', 'display_order'])

    # Products
    op.create_table(
        'products',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('household_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.Text, nullable=False),
        sa.Column('emoji', sa.Text, nullable=False, server_default='📦'),
        sa.Column('category_id', postgresql.UUID(as_uuid=True),
                  sa.ForeignKey('product_categories.id', ondelete='SET NULL')),
        sa.Column('frequency_correction_factor', sa.Float, nullable=False, server_default='1.0',
                  comment='Multiplier on the learned purchase interval, raised by snoozes, max 2.0'),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.CheckConstraint('frequency_correction_factor > 0 AND frequency_correction_factor <= 2.0',
                           name='ck_products_correction_factor_range'),
    )
    op.create_index('idx_products_household', 'products', ['household_id'])

    # One active snooze per product per household (upsert key)
    op.create_table(
        'product_snoozes',
        sa.Column('household_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('product_id', postgresql.UUID(as_uuid=True),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('snoozed_until', sa.TIMESTAMP(timezone=True), nullable=False),
    )
    op.create_unique_constraint('uq_product_snoozes_household_product', 'product_snoozes',
                                ['household_id', 'product_id'])

    # Purchase history (read by the frequency model)
    op.create_table(
        'purchase_history',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('household_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('product_id', postgresql.UUID(as_uuid=True),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('purchased_at', sa.TIMESTAMP(timezone=True), nullable=False, server_default=sa.text('NOW()')),
    )
    op.create_index('idx_purchase_history_household_date', 'purchase_history', ['household_id', 'purchased_at'])

    # Shopping list items (only the columns the expected list needs)
    op.create_table(
        'shopping_list_items',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('household_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('product_id', postgresql.UUID(as_uuid=True),
                  sa.ForeignKey('products.id', ondelete='SET NULL')),
        sa.Column('is_checked', sa.Boolean, nullable=False, server_default='false'),
    )
    op.create_index('idx_shopping_list_items_household', 'shopping_list_items', ['household_id', 'is_checked'])


def downgrade() -> None:
    op.drop_table('shopping_list_items')
    op.drop_table('purchase_history')
    op.drop_table('product_snoozes')
    op.drop_table('products')
    op.drop_table('product_categories')
