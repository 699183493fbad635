"""Dependency rows and the columns that display them."""

from .columns import build_dep_columns
from .models import ComputedDep, CountPair, Dep, TrustedPair, VerificationStatus

__all__ = [
    "build_dep_columns",
    "ComputedDep",
    "CountPair",
    "Dep",
    "TrustedPair",
    "VerificationStatus",
]
