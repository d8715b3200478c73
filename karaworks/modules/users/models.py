"""Domain models for users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


class UserRole:
    WORKER = "worker"
    HOTEL = "hotel"

    ALL = frozenset({WORKER, HOTEL})


@dataclass(slots=True)
class User:
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


@dataclass(slots=True)
class UserCreateInput:
    phone: str
    name: str
    role: str = UserRole.WORKER
    photo: Optional[str] = None
    hotel_id: Optional[str] = None
    bank_id: Optional[str] = None
    bank_account_name: Optional[str] = None
    bank_account_id: Optional[str] = None
