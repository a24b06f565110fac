"""FinanceItem: receivable or payable, told apart by its kind tag.

Both kinds share id, amount and due date. Only payables carry an impact score
(1-100, higher means more critical to pay).
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from sme.utilities.constants import DATE_FORMAT, MIN_IMPACT_SCORE, MAX_IMPACT_SCORE


class FinanceKind(str, Enum):
    RECEIVABLE = "receivable"
    PAYABLE = "payable"


@dataclass(frozen=True)
class FinanceItem:
    id: int
    kind: FinanceKind
    amount: float
    due_date: date
    impact_score: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.kind, FinanceKind):
            raise ValueError(f"kind must be FinanceKind, got {type(self.kind).__name__}.")
        if self.amount < 0:
            raise ValueError(f"Amount cannot be negative: {self.amount}")
        if self.kind is FinanceKind.PAYABLE:
            if self.impact_score is None or not (MIN_IMPACT_SCORE <= self.impact_score <= MAX_IMPACT_SCORE):
                raise ValueError(
                    f"Payable impact score must be between {MIN_IMPACT_SCORE} and "
                    f"{MAX_IMPACT_SCORE}, got {self.impact_score}."
                )
        elif self.impact_score is not None:
            raise ValueError("Receivables do not carry an impact score.")

    @classmethod
    def receivable(cls, id: int, amount: float, due_date: date) -> "FinanceItem":
        return cls(id, FinanceKind.RECEIVABLE, amount, due_date)

    @classmethod
    def payable(cls, id: int, amount: float, due_date: date, impact_score: int) -> "FinanceItem":
        return cls(id, FinanceKind.PAYABLE, amount, due_date, impact_score)

    @property
    def is_payable(self) -> bool:
        return self.kind is FinanceKind.PAYABLE

    @property
    def weight(self) -> int:
        """Amount rounded half-up to a whole currency unit."""
        return int(math.floor(self.amount + 0.5))

    @property
    def signed_amount(self) -> float:
        """Cash effect: receivables add, payables subtract."""
        return -self.amount if self.is_payable else self.amount

    def __str__(self) -> str:
        due = self.due_date.strftime(DATE_FORMAT)
        if self.is_payable:
            return f"[P#{self.id}] Pay {self.amount:.2f} by {due} | impact={self.impact_score}"
        return f"[R#{self.id}] Receive {self.amount:.2f} by {due}"

    def to_dict(self):
        d = {
            "id": self.id,
            "kind": self.kind.value,
            "amount": self.amount,
            "due_date": self.due_date.strftime(DATE_FORMAT),
        }
        if self.is_payable:
            d["impact_score"] = self.impact_score
        return d
