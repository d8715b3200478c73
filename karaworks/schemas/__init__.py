"""Pydantic schemas used across the project."""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenData(BaseModel):
    user_id: str
    phone: str
    role: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str


class UserCreate(BaseModel):
    phone: str = Field(..., min_length=6, max_length=20)
    name: str = Field(..., min_length=1, max_length=255)
    role: str = Field(default="worker", pattern="^(worker|hotel)$")
    photo: Optional[str] = None
    hotel_id: Optional[str] = None
    bank_id: Optional[str] = None
    bank_account_name: Optional[str] = Field(default=None, max_length=255)
    bank_account_id: Optional[str] = Field(default=None, max_length=100)


class UserUpdate(BaseModel):
    phone: Optional[str] = Field(default=None, min_length=6, max_length=20)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    role: Optional[str] = Field(default=None, pattern="^(worker|hotel)$")
    photo: Optional[str] = None
    hotel_id: Optional[str] = None
    bank_id: Optional[str] = None
    bank_account_name: Optional[str] = Field(default=None, max_length=255)
    bank_account_id: Optional[str] = Field(default=None, max_length=100)


class UserResponse(BaseModel):
    id: str
    phone: str
    name: str
    role: str
    photo: Optional[str] = None
    hotel_id: Optional[str] = None
    bank_id: Optional[str] = None
    bank_account_name: Optional[str] = None
    bank_account_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    data: list[UserResponse]


class BankCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class BankResponse(BaseModel):
    id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BankListResponse(BaseModel):
    data: list[BankResponse]


class HotelCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str = Field(..., min_length=1, max_length=255)
    logo: Optional[str] = None


class HotelUpdate(BaseModel):
    email: Optional[str] = Field(default=None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    logo: Optional[str] = None


class HotelResponse(BaseModel):
    id: str
    email: str
    name: str
    logo: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class HotelListResponse(BaseModel):
    data: list[HotelResponse]


class FeeUpdate(BaseModel):
    bank_fee: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    platform_fee: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2)


class FeeResponse(BaseModel):
    bank_fee: Decimal
    platform_fee: Decimal
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class EventCreate(BaseModel):
    creator_id: str
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    event_date: datetime
    salary: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)
    person_count: int = Field(..., ge=1)
    status: str = Field(default="posted", pattern="^(pending|posted)$")


class EventUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    event_date: Optional[datetime] = None
    salary: Optional[Decimal] = Field(default=None, ge=0, max_digits=15, decimal_places=2)
    person_count: Optional[int] = Field(default=None, ge=1)
    status: Optional[str] = Field(default=None, pattern="^(pending|posted)$")


class EventResponse(BaseModel):
    id: str
    creator_id: str
    name: str
    description: Optional[str] = None
    event_date: datetime
    salary: Optional[Decimal] = None
    person_count: int
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class EventListResponse(BaseModel):
    data: list[EventResponse]


class PaidApplicationResponse(BaseModel):
    application_id: str = Field(serialization_alias="applicationId")
    worker_id: str = Field(serialization_alias="workerId")


class FinishEventResponse(BaseModel):
    message: str
    processed_count: int = Field(serialization_alias="processedCount")
    processed: list[PaidApplicationResponse] = Field(default_factory=list)


class ApplicationCreate(BaseModel):
    event_id: str
    user_id: str


class ClockRecord(BaseModel):
    qr_data: str = Field(..., min_length=1, description="Scanned QR payload")
    prove: Optional[str] = Field(default=None, description="URL of the photo proof")


class ApplicationUpdate(BaseModel):
    status: Optional[str] = Field(default=None, pattern="^(applied|accepted|rejected|finished)$")
    clock_in_qr_data: Optional[str] = None
    clock_out_qr_data: Optional[str] = None
    clock_in_prove: Optional[str] = None
    clock_out_prove: Optional[str] = None


class ApplicationResponse(BaseModel):
    id: str
    event_id: str
    user_id: str
    status: str
    clock_in_qr_data: Optional[str] = None
    clock_out_qr_data: Optional[str] = None
    clock_in_prove: Optional[str] = None
    clock_out_prove: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ApplicationListResponse(BaseModel):
    data: list[ApplicationResponse]


class WalletSnapshotResponse(BaseModel):
    id: Optional[str] = None
    user_id: str
    balance: Decimal
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class WalletTransactionResponse(BaseModel):
    id: str
    wallet_id: str
    event_id: Optional[str] = None
    withdraw_id: Optional[str] = None
    amount: Decimal
    transaction_date: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class WalletTransactionListResponse(BaseModel):
    data: list[WalletTransactionResponse]


class WalletTransactionPageResponse(BaseModel):
    page: int
    limit: int
    count: int
    data: list[WalletTransactionResponse]


class MonthRange(BaseModel):
    start: datetime
    end: datetime


class WalletTransactionMonthResponse(BaseModel):
    data: list[WalletTransactionResponse]
    range: MonthRange
