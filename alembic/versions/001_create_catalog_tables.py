"""Create catalog and user tables.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create categories, brands, products, roles, users and users_roles tables."""
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        'brands',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('discount_percentage', sa.Float(), nullable=False, server_default='0'),
        sa.Column('rating', sa.Float(), nullable=False, server_default='0'),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('thumbnail', sa.String(1000), nullable=True),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('category_id', sa.Integer(),
                  sa.ForeignKey('categories.id'), nullable=False, index=True),
        sa.Column('brand_id', sa.Integer(),
                  sa.ForeignKey('brands.id'), nullable=False, index=True),
    )

    op.create_table(
        'roles',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(50), nullable=False, unique=True),
    )

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=True),
        sa.Column('username', sa.String(100), nullable=False, unique=True),
        sa.Column('email', sa.String(255), nullable=True, unique=True),
        sa.Column('password', sa.String(255), nullable=False),
    )

    op.create_table(
        'users_roles',
        sa.Column('user_id', sa.Integer(),
                  sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('role_id', sa.Integer(),
                  sa.ForeignKey('roles.id', ondelete='CASCADE'), primary_key=True),
    )

    # Default roles
    roles = sa.table('roles', sa.column('name', sa.String))
    op.bulk_insert(roles, [{'name': 'ROLE_USER'}, {'name': 'ROLE_ADMIN'}])


def downgrade() -> None:
    """Drop all tables created by this revision."""
    op.drop_table('users_roles')
    op.drop_table('users')
    op.drop_table('roles')
    op.drop_table('products')
    op.drop_table('brands')
    op.drop_table('categories')
