"""Karaworks gig-work marketplace backend."""

__version__ = "0.1.0"
