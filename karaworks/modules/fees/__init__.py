"""Withdraw fee settings exports"""

from .models import FeeSchedule

__all__ = ["FeeSchedule"]
