"""Initial farm record and user tables

Revision ID: 001_initial_farm_records
Revises: 
Create Date: 2026-01-05
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = '001_initial_farm_records'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Enum columns store member names
FARMS = ('KAASI_19', 'MATITAL', 'COMBINED', 'OTHER', 'MANAGEMENT')
EXPENSE_HEADS = (
    'CHICKEN', 'FEED', 'RENT', 'UTILITIES', 'PACKING_MATERIAL', 'TP',
    'SALARIES_PAYMENTS', 'MESS', 'POWER_ELECTRIC', 'POL', 'MEDICINE', 'VACCINE',
    'REPAIR_MAINTENANCE', 'TRAVELLING_LOGISTICS', 'OFFICE_EXPENSES',
    'MEETING_REFRESHMENT', 'FURNITURE_FIXTURE', 'COMPUTER_DEVICES',
    'PROFESSIONAL_FEE', 'MISCELLANEOUS', 'SHAREHOLDERS_DIVIDEND', 'OTHER',
)


def upgrade() -> None:
    # Shared by several tables, so created once up front
    postgresql.ENUM(*FARMS, name='farm').create(op.get_bind(), checkfirst=True)
    farm_enum = postgresql.ENUM(*FARMS, name='farm', create_type=False)

    # Users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', sa.Enum('ADMIN', 'USER', name='userrole'), nullable=False, server_default='USER'),
        sa.Column('is_email_verified', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email')
    )
    op.create_index('ix_users_email', 'users', ['email'])

    # Expenses table
    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('expense_date', sa.Date(), nullable=False),
        sa.Column('month', sa.String(3), nullable=True),
        sa.Column('challan', sa.String(100), nullable=True),
        sa.Column('trans_id', sa.String(100), nullable=True),
        sa.Column('farm', farm_enum, nullable=False),
        sa.Column('head', sa.Enum(*EXPENSE_HEADS, name='expensehead'), nullable=False),
        sa.Column('expense_cost', sa.Numeric(18, 2), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_expenses_farm_date', 'expenses', ['farm', 'expense_date'])
    op.create_index('idx_expenses_head', 'expenses', ['head'])

    # Egg sales table
    op.create_table(
        'egg_sales',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('sale_date', sa.Date(), nullable=False),
        sa.Column('month', sa.String(3), nullable=True),
        sa.Column('challan_number', sa.String(100), nullable=True),
        sa.Column('farm', farm_enum, nullable=False),
        sa.Column('amount_received', sa.Numeric(18, 2), nullable=False),
        sa.Column('description', sa.String(500), nullable=False),
        sa.Column('type', sa.String(50), nullable=False, server_default='Eggs'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_egg_sales_farm_date', 'egg_sales', ['farm', 'sale_date'])

    # Egg production table
    op.create_table(
        'egg_productions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('production_date', sa.Date(), nullable=False),
        sa.Column('month', sa.String(3), nullable=True),
        sa.Column('farm', farm_enum, nullable=False),
        sa.Column('chicken_eggs', sa.Integer(), nullable=False),
        sa.Column('total_eggs', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )

    # Feed purchases table
    op.create_table(
        'feed_purchases',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('purchase_date', sa.Date(), nullable=False),
        sa.Column('month', sa.String(3), nullable=True),
        sa.Column('voucher_type', sa.Enum('IN', 'OUT', name='vouchertype'), nullable=False),
        sa.Column('feed_type', sa.String(100), nullable=False),
        sa.Column('farm', farm_enum, nullable=False),
        sa.Column('bags', sa.Integer(), nullable=False),
        sa.Column('description', sa.String(500), nullable=True),
        sa.Column('debit', sa.Numeric(18, 2), nullable=True),
        sa.Column('credit', sa.Numeric(18, 2), nullable=True),
        sa.Column('running_balance', sa.Numeric(18, 2), nullable=False, server_default='0'),
        sa.Column('reconciled', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('posted_to_statement', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_feed_purchases_farm_date', 'feed_purchases', ['farm', 'purchase_date'])

    # Salaries table
    op.create_table(
        'salaries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('month', sa.String(20), nullable=False),
        sa.Column('employee_name', sa.String(200), nullable=False),
        sa.Column('designation', sa.String(100), nullable=False),
        sa.Column('farm', farm_enum, nullable=True),
        sa.Column('attendance', sa.Integer(), nullable=True),
        sa.Column('basic_salary', sa.Numeric(18, 2), nullable=True),
        sa.Column('salary_amount', sa.Numeric(18, 2), nullable=False),
        sa.Column('advance', sa.Numeric(18, 2), nullable=True),
        sa.Column('penalty_reward', sa.Numeric(18, 2), nullable=True),
        sa.Column('total', sa.Numeric(18, 2), nullable=False),
        sa.Column('remarks', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('salaries')
    op.drop_index('idx_feed_purchases_farm_date', table_name='feed_purchases')
    op.drop_table('feed_purchases')
    op.drop_table('egg_productions')
    op.drop_index('idx_egg_sales_farm_date', table_name='egg_sales')
    op.drop_table('egg_sales')
    op.drop_index('idx_expenses_head', table_name='expenses')
    op.drop_index('idx_expenses_farm_date', table_name='expenses')
    op.drop_table('expenses')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    # Drop enums
    op.execute("DROP TYPE IF EXISTS vouchertype")
    op.execute("DROP TYPE IF EXISTS expensehead")
    op.execute("DROP TYPE IF EXISTS farm")
    op.execute("DROP TYPE IF EXISTS userrole")
