"""Create debt tracker tables.

Revision ID: 001_create_debt_tables
Revises: None
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_create_debt_tables'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list:
    return [
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create users, debts, debt_payments and receipts."""
    op.create_table(
        'users',
        *_timestamps(),
        sa.Column('external_id', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_user_external_id', 'users', ['external_id'], unique=True)

    op.create_table(
        'debts',
        *_timestamps(),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('debt_type', sa.String(32), nullable=False),
        sa.Column('total_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('current_balance', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('interest_rate', sa.Numeric(precision=6, scale=2), nullable=True),
        sa.Column('min_payment', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(16), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_debts_user_id', 'debts', ['user_id'])
    op.create_index('idx_debt_user_created', 'debts', ['user_id', 'created_at'])
    op.create_index('idx_debt_status', 'debts', ['status'])

    op.create_table(
        'debt_payments',
        *_timestamps(),
        sa.Column('debt_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['debt_id'], ['debts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_debt_payments_debt_id', 'debt_payments', ['debt_id'])
    op.create_index('ix_debt_payments_user_id', 'debt_payments', ['user_id'])
    op.create_index('ix_debt_payments_payment_date', 'debt_payments', ['payment_date'])
    op.create_index('idx_debt_payment_debt_date', 'debt_payments', ['debt_id', 'payment_date'])
    op.create_index('idx_debt_payment_user_date', 'debt_payments', ['user_id', 'payment_date'])

    op.create_table(
        'receipts',
        *_timestamps(),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('debt_id', sa.Integer(), nullable=True),
        sa.Column('file_url', sa.String(1024), nullable=False),
        sa.Column('merchant', sa.String(255), nullable=True),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('receipt_date', sa.Date(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['debt_id'], ['debts.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_receipts_user_id', 'receipts', ['user_id'])
    op.create_index('ix_receipts_debt_id', 'receipts', ['debt_id'])


def downgrade() -> None:
    """Drop debt tracker tables."""
    op.drop_table('receipts')
    op.drop_table('debt_payments')
    op.drop_table('debts')
    op.drop_table('users')
