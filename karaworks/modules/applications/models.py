"""Domain models for event applications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


class ApplicationStatus:
    APPLIED = "applied"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    FINISHED = "finished"

    ALL = frozenset({APPLIED, ACCEPTED, REJECTED, FINISHED})


@dataclass(slots=True)
class Application:
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

    @property
    def clocked_out(self) -> bool:
        return self.clock_out_qr_data is not None
