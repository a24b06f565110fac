"""
Outcome of a store mutation.

Every mutation either fully applies and returns a successful Outcome, or
changes nothing and returns an Outcome carrying the Failure kind. An Outcome is
truthy only on success, so callers can treat it as a success flag.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Failure(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_QUANTITY = "invalid_quantity"
    CYCLE_DETECTED = "cycle_detected"
    INVALID_BUDGET = "invalid_budget"


@dataclass(frozen=True)
class Outcome:
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> "Outcome":
        return SUCCESS

    @classmethod
    def rejected(cls, failure: Failure) -> "Outcome":
        if not isinstance(failure, Failure):
            raise ValueError(f"failure must be Failure, got {type(failure).__name__}.")
        return cls(failure)


SUCCESS = Outcome()

__all__ = ['Failure', 'Outcome', 'SUCCESS']
