# utils/result.py
"""
Success-or-failure wrapper for store reads.

Reads that the presentation layer wants to degrade silently go through
`Result.unwrap_or`, which logs the failure and hands back a default.
"""

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from utils.errors import StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[StoreError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StoreError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value or raise the captured StoreError."""
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Collapse a failure to `default`, logging it."""
        if self.error is not None:
            logger.error(f"Degrading to default after store failure: {self.error}", exc_info=self.error)
            return default
        return self.value
