"""
Models package for polysum.

This package contains the algorithm enumerations and Pydantic-based models for
checksum listings, hashing results and run settings.
"""

from .algorithm import Algorithm, Mode, DEFAULT_ALGORITHM
from .hash_entry import HashEntry, HashFile
from .hash_result import HashResult, VerifyResult
from .settings import HashingSettings

__all__ = [
    "Algorithm",
    "Mode",
    "DEFAULT_ALGORITHM",
    "HashEntry",
    "HashFile",
    "HashResult",
    "VerifyResult",
    "HashingSettings",
]
