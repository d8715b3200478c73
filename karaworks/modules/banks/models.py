from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Bank:
    id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
