"""Create accounts, debts, ledger_entries and debt_payments tables

Revision ID: 20250509_000001
Revises:
Create Date: 2025-05-09

debt_payments.related_entry_id is unique: no two payments may
mirror into the same ledger entry.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20250509_000001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("type", sa.String(30), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_accounts_user_id", "accounts", ["user_id"])

    op.create_table(
        "debts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column(
            "type",
            sa.Enum("debt", "receivable", name="debt_type_enum", create_constraint=True),
            nullable=False,
        ),
        sa.Column("party_name", sa.String(100), nullable=False),
        sa.Column("title", sa.String(150), nullable=True),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("paid_total", sa.Numeric(19, 4), nullable=False),
        sa.Column(
            "status",
            sa.Enum("ongoing", "paid", "overdue", name="debt_status_enum", create_constraint=True),
            nullable=False,
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_debts_user_id", "debts", ["user_id"])

    op.create_table(
        "ledger_entries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column(
            "entry_type",
            sa.Enum("income", "expense", name="entry_type_enum"),
            nullable=False,
        ),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("account_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("note", sa.String(255), nullable=True),
        sa.Column("notes", sa.String(255), nullable=True),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.Column("revision", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["account_id"],
            ["accounts.id"],
            name="fk_ledger_entries_account_id",
        ),
    )
    op.create_index("ix_ledger_entries_user_id", "ledger_entries", ["user_id"])
    op.create_index("ix_ledger_entries_account_id", "ledger_entries", ["account_id"])

    op.create_table(
        "debt_payments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("debt_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("account_id", sa.Integer(), nullable=False),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("paid_at", sa.Date(), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("note", sa.Text(), nullable=True),
        sa.Column("related_entry_id", sa.Integer(), nullable=True),
        sa.Column("revoked_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["account_id"],
            ["accounts.id"],
            name="fk_debt_payments_account_id",
            ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["related_entry_id"],
            ["ledger_entries.id"],
            name="fk_debt_payments_related_entry_id",
        ),
        sa.UniqueConstraint("related_entry_id", name="uq_debt_payments_related_entry_id"),
    )
    op.create_index("ix_debt_payments_debt_id", "debt_payments", ["debt_id"])
    op.create_index("ix_debt_payments_user_id", "debt_payments", ["user_id"])
    op.create_index("ix_debt_payments_account_id", "debt_payments", ["account_id"])


def downgrade() -> None:
    op.drop_index("ix_debt_payments_account_id", table_name="debt_payments")
    op.drop_index("ix_debt_payments_user_id", table_name="debt_payments")
    op.drop_index("ix_debt_payments_debt_id", table_name="debt_payments")
    op.drop_table("debt_payments")
    op.drop_index("ix_ledger_entries_account_id", table_name="ledger_entries")
    op.drop_index("ix_ledger_entries_user_id", table_name="ledger_entries")
    op.drop_table("ledger_entries")
    op.drop_index("ix_debts_user_id", table_name="debts")
    op.drop_table("debts")
    op.drop_index("ix_accounts_user_id", table_name="accounts")
    op.drop_table("accounts")
