"""Domain models for hotels, the businesses that post events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Hotel:
    id: str
    email: str
    name: str
    logo: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class HotelCreateInput:
    email: str
    name: str
    logo: Optional[str] = None
