"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from karaworks.infrastructure.database.base import Base

MONEY = Numeric(15, 2)


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Bank(Base):
    __tablename__ = "banks"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class Hotel(Base):
    __tablename__ = "hotels"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    logo = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class Fee(Base):
    """Single-row table holding the platform-wide withdraw fees."""

    __tablename__ = "fees"

    id = Column(Integer, primary_key=True, default=1)
    bank_fee = Column(Numeric(12, 2), nullable=False, default=0)
    platform_fee = Column(Numeric(12, 2), nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    phone = Column(String(20), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    photo = Column(Text)
    role = Column(String(50), nullable=False, default="worker")  # worker, hotel
    hotel_id = Column(String(36), ForeignKey("hotels.id", ondelete="SET NULL"), index=True)
    bank_id = Column(String(36), ForeignKey("banks.id", ondelete="SET NULL"), index=True)
    bank_account_name = Column(String(255))
    bank_account_id = Column(String(255))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class Event(Base):
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    creator_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    event_date = Column(DateTime(timezone=True), nullable=False, index=True)
    salary = Column(MONEY, nullable=False)
    person_count = Column(Integer, nullable=False)
    status = Column(String(50), nullable=False, default="posted", index=True)  # pending, posted, finished
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    creator = relationship("User")
    applications = relationship("Application", back_populates="event")


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (UniqueConstraint("event_id", "user_id", name="uq_applications_event_user"),)

    id = Column(String(36), primary_key=True, default=generate_uuid)
    event_id = Column(String(36), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(50), nullable=False, default="applied", index=True)
    clock_in_qr_data = Column(Text)
    clock_out_qr_data = Column(Text)
    clock_in_prove = Column(Text)
    clock_out_prove = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    event = relationship("Event", back_populates="applications")
    user = relationship("User")


class Wallet(Base):
    __tablename__ = "wallets"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    balance = Column(MONEY, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User")
    transactions = relationship("WalletTransaction", back_populates="wallet")


class Withdraw(Base):
    __tablename__ = "withdraws"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    wallet_reduction = Column(MONEY, nullable=False)
    withdraw_amount = Column(MONEY, nullable=False)
    bank_account_id = Column(String(255), nullable=False)
    bank_id = Column(String(36), ForeignKey("banks.id", ondelete="SET NULL"))
    bank_account_name = Column(String(255), nullable=False)
    status = Column(String(50), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class WalletTransaction(Base):
    __tablename__ = "wallet_transactions"
    __table_args__ = (
        CheckConstraint(
            "(event_id IS NOT NULL AND withdraw_id IS NULL) OR (event_id IS NULL AND withdraw_id IS NOT NULL)",
            name="ck_wallet_transactions_single_origin",
        ),
        UniqueConstraint("wallet_id", "event_id", name="uq_wallet_transactions_wallet_event"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    wallet_id = Column(String(36), ForeignKey("wallets.id", ondelete="CASCADE"), nullable=False, index=True)
    event_id = Column(String(36), ForeignKey("events.id", ondelete="SET NULL"), nullable=True, index=True)
    withdraw_id = Column(String(36), ForeignKey("withdraws.id", ondelete="SET NULL"), nullable=True, index=True)
    amount = Column(MONEY, nullable=False)
    transaction_date = Column(DateTime(timezone=True), server_default=func.now())
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    wallet = relationship("Wallet", back_populates="transactions")
    event = relationship("Event")
    withdraw = relationship("Withdraw")
