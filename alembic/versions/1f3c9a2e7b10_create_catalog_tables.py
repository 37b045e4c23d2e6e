"""create_catalog_tables

Revision ID: 1f3c9a2e7b10
Revises:
Create Date: 2026-10-17

Adds:
- categories table (bilingual name stored as JSON text, unique)
- recipes table (bilingual fields and ingredient/instruction lists as JSON text)
"""
from alembic import op
import sqlalchemy as sa

revision = '1f3c9a2e7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'categories',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('image_file_name', sa.String(255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )

    op.create_table(
        'recipes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('prep_time', sa.String(50), nullable=False, server_default=''),
        sa.Column('cook_time', sa.String(50), nullable=False, server_default=''),
        sa.Column('image_file_name', sa.String(255), nullable=True),
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('ingredients', sa.Text(), nullable=False, server_default='[]'),
        sa.Column('instructions', sa.Text(), nullable=False, server_default='[]'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_recipes_category_id', 'recipes', ['category_id'])


def downgrade() -> None:
    op.drop_index('idx_recipes_category_id', table_name='recipes')
    op.drop_table('recipes')
    op.drop_table('categories')
