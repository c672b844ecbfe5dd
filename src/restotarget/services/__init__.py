"""Application services."""

from .targeting_session import TargetingSession

__all__ = ["TargetingSession"]
