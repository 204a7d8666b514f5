"""create users, profiles, transactions and scrap_rates tables

Revision ID: b41c7e2f9a13
Revises:
Create Date: 2026-10-19 11:02:41.518203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b41c7e2f9a13'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=True),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('user_id')
    )
    op.create_index('ix_users_user_id', 'users', ['user_id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'profiles',
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('display_name', sa.String(length=100), nullable=True),
        sa.Column('avatar_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ),
        sa.PrimaryKeyConstraint('profile_id'),
        sa.UniqueConstraint('user_id')
    )
    op.create_index('ix_profiles_profile_id', 'profiles', ['profile_id'])

    op.create_table(
        'transactions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('transaction_id', sa.String(length=35), nullable=False),
        sa.Column('categories', sa.JSON(), nullable=False),
        sa.Column('weight_kg', sa.Float(), nullable=False),
        sa.Column('location', sa.String(length=200), nullable=False),
        sa.Column('estimated_price', sa.DECIMAL(precision=10, scale=2), nullable=False),
        sa.Column('confidence_score', sa.Integer(), nullable=False),
        sa.Column('pickup_date', sa.Date(), nullable=False),
        sa.Column('pickup_time', sa.String(length=50), nullable=False),
        sa.Column('pickup_type', sa.String(length=10), nullable=False, server_default='pickup'),
        sa.Column('payment_method', sa.String(length=10), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_transactions_id', 'transactions', ['id'])
    op.create_index('ix_transactions_user_id', 'transactions', ['user_id'])
    op.create_index('ix_transactions_transaction_id', 'transactions', ['transaction_id'], unique=True)

    scrap_rates = op.create_table(
        'scrap_rates',
        sa.Column('category', sa.String(length=20), nullable=False),
        sa.Column('price_per_kg', sa.DECIMAL(precision=8, scale=2), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('category')
    )

    # Default market rates, INR per kg
    op.bulk_insert(
        scrap_rates,
        [
            {'category': 'paper', 'price_per_kg': 15.00},
            {'category': 'plastic', 'price_per_kg': 12.00},
            {'category': 'metal', 'price_per_kg': 35.00},
            {'category': 'ewaste', 'price_per_kg': 120.00},
        ]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('scrap_rates')
    op.drop_index('ix_transactions_transaction_id', table_name='transactions')
    op.drop_index('ix_transactions_user_id', table_name='transactions')
    op.drop_index('ix_transactions_id', table_name='transactions')
    op.drop_table('transactions')
    op.drop_index('ix_profiles_profile_id', table_name='profiles')
    op.drop_table('profiles')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_user_id', table_name='users')
    op.drop_table('users')
