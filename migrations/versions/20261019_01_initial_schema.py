"""create banks, hotels, fees, users, events, applications and wallet ledger tables

Revision ID: 3f9c1d7a2b10
Revises: 
Create Date: 2026-10-19 09:30:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f9c1d7a2b10"
down_revision = None
branch_labels = None
depends_on = None

MONEY = sa.Numeric(15, 2)


def upgrade() -> None:
    op.create_table(
        "banks",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )

    op.create_table(
        "hotels",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("logo", sa.Text()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "fees",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("bank_fee", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("platform_fee", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("phone", sa.String(length=20), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("photo", sa.Text()),
        sa.Column("role", sa.String(length=50), nullable=False, server_default="worker"),
        sa.Column("hotel_id", sa.String(length=36), sa.ForeignKey("hotels.id", ondelete="SET NULL")),
        sa.Column("bank_id", sa.String(length=36), sa.ForeignKey("banks.id", ondelete="SET NULL")),
        sa.Column("bank_account_name", sa.String(length=255)),
        sa.Column("bank_account_id", sa.String(length=255)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )
    op.create_index("ix_users_phone", "users", ["phone"], unique=True)
    op.create_index("ix_users_hotel_id", "users", ["hotel_id"])
    op.create_index("ix_users_bank_id", "users", ["bank_id"])

    op.create_table(
        "events",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("creator_id", sa.String(length=36), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("event_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("salary", MONEY, nullable=False),
        sa.Column("person_count", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="posted"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )
    op.create_index("ix_events_creator_id", "events", ["creator_id"])
    op.create_index("ix_events_event_date", "events", ["event_date"])
    op.create_index("ix_events_status", "events", ["status"])

    op.create_table(
        "applications",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("event_id", sa.String(length=36), sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="applied"),
        sa.Column("clock_in_qr_data", sa.Text()),
        sa.Column("clock_out_qr_data", sa.Text()),
        sa.Column("clock_in_prove", sa.Text()),
        sa.Column("clock_out_prove", sa.Text()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.UniqueConstraint("event_id", "user_id", name="uq_applications_event_user"),
    )
    op.create_index("ix_applications_event_id", "applications", ["event_id"])
    op.create_index("ix_applications_user_id", "applications", ["user_id"])
    op.create_index("ix_applications_status", "applications", ["status"])

    op.create_table(
        "wallets",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("balance", MONEY, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
        sa.UniqueConstraint("user_id"),
    )

    op.create_table(
        "withdraws",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("wallet_reduction", MONEY, nullable=False),
        sa.Column("withdraw_amount", MONEY, nullable=False),
        sa.Column("bank_account_id", sa.String(length=255), nullable=False),
        sa.Column("bank_id", sa.String(length=36), sa.ForeignKey("banks.id", ondelete="SET NULL")),
        sa.Column("bank_account_name", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True)),
    )

    op.create_table(
        "wallet_transactions",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("wallet_id", sa.String(length=36), sa.ForeignKey("wallets.id", ondelete="CASCADE"), nullable=False),
        sa.Column("event_id", sa.String(length=36), sa.ForeignKey("events.id", ondelete="SET NULL")),
        sa.Column("withdraw_id", sa.String(length=36), sa.ForeignKey("withdraws.id", ondelete="SET NULL")),
        sa.Column("amount", MONEY, nullable=False),
        sa.Column("transaction_date", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint(
            "(event_id IS NOT NULL AND withdraw_id IS NULL) OR (event_id IS NULL AND withdraw_id IS NOT NULL)",
            name="ck_wallet_transactions_single_origin",
        ),
        sa.UniqueConstraint("wallet_id", "event_id", name="uq_wallet_transactions_wallet_event"),
    )
    op.create_index("ix_wallet_transactions_wallet_id", "wallet_transactions", ["wallet_id"])
    op.create_index("ix_wallet_transactions_event_id", "wallet_transactions", ["event_id"])
    op.create_index("ix_wallet_transactions_withdraw_id", "wallet_transactions", ["withdraw_id"])


def downgrade() -> None:
    op.drop_table("wallet_transactions")
    op.drop_table("withdraws")
    op.drop_table("wallets")
    op.drop_table("applications")
    op.drop_table("events")
    op.drop_table("users")
    op.drop_table("fees")
    op.drop_table("hotels")
    op.drop_table("banks")
