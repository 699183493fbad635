"""Data sources feeding the verification screen."""

from .demo import DemoVerification
from .store import DataSource, DepTable, VerificationStore

__all__ = ["DataSource", "DemoVerification", "DepTable", "VerificationStore"]
