"""Core settings and security helpers."""
