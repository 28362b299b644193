"""create categories and transactions

Revision ID: 0001_create_categories_and_transactions
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_create_categories_and_transactions'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'categories',
        sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(length=160), nullable=False),
        sa.Column('title', sa.String(length=80), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
    )
    op.create_index('ix_categories_user_id', 'categories', ['user_id'])

    op.create_table(
        'transactions',
        sa.Column('id', sa.BigInteger().with_variant(sa.Integer(), 'sqlite'), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(length=160), nullable=False),
        sa.Column('category_id', sa.BigInteger(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('amount', sa.Numeric(18, 2), nullable=False),
        sa.Column('paid_or_received_at', sa.DateTime(), nullable=False),
        sa.Column('title', sa.String(length=80), nullable=False),
        sa.Column('type', sa.Enum('deposit', 'withdraw', name='transactiontype'), nullable=False),
    )
    op.create_index('ix_transactions_user_id', 'transactions', ['user_id'])
    op.create_index('ix_transactions_paid_or_received_at', 'transactions', ['paid_or_received_at'])


def downgrade() -> None:
    op.drop_index('ix_transactions_paid_or_received_at', table_name='transactions')
    op.drop_index('ix_transactions_user_id', table_name='transactions')
    op.drop_table('transactions')
    sa.Enum(name='transactiontype').drop(op.get_bind(), checkfirst=True)
    op.drop_index('ix_categories_user_id', table_name='categories')
    op.drop_table('categories')
