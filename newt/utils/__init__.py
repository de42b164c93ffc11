"""Utility helpers for time operations."""

from .time import unix_seconds, utc_now

__all__ = ["utc_now", "unix_seconds"]
