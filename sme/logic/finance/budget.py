"""Bill selection under a cash budget (0/1 knapsack).

Each payable weighs its amount rounded to a whole currency unit and is worth
its impact score. The selector picks the subset with the highest total impact
whose total weight fits the budget.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from sme.domain.FinanceItem import FinanceItem
from sme.domain.Outcome import Failure
from sme.utilities import config

logger = logging.getLogger(__name__)

__all__ = ["BudgetSelector", "Selection"]


@dataclass(frozen=True)
class Selection:
    items: List[FinanceItem] = field(default_factory=list)
    capacity: int = 0
    total_weight: int = 0
    total_value: int = 0
    failure: Optional[Failure] = None

    @property
    def total_amount(self) -> float:
        return sum(p.amount for p in self.items)


class BudgetSelector:
    """Stateless optimizer; capacity_cap bounds the DP table width."""

    def __init__(self, capacity_cap: Optional[int] = None):
        self.capacity_cap = config.KNAPSACK_CAPACITY_CAP if capacity_cap is None else capacity_cap

    def capacity_for(self, budget: float) -> int:
        if budget <= 0:
            return 0
        return max(0, min(int(math.floor(budget)), self.capacity_cap))

    @staticmethod
    def solve(weights: Sequence[int], values: Sequence[int], capacity: int) -> List[int]:
        """Return the indices (ascending) of an optimal subset.

        Uses one rolling value row and, per item, a bitmap of the capacities at
        which taking that item strictly improved the optimum. Backtracking walks
        the items from last to first, so ties between equally good subsets are
        always settled the same way.
        """
        if len(weights) != len(values):
            raise ValueError("weights and values must have the same length")
        capacity = max(capacity, 0)
        best = [0] * (capacity + 1)
        taken: List[bytearray] = []
        for wt, val in zip(weights, values):
            if wt < 0:
                raise ValueError(f"Weight cannot be negative: {wt}")
            keep = bytearray(capacity + 1)
            # descending so best[w - wt] still holds the previous item's row
            for w in range(capacity, wt - 1, -1):
                candidate = best[w - wt] + val
                if candidate > best[w]:
                    best[w] = candidate
                    keep[w] = 1
            taken.append(keep)

        chosen: List[int] = []
        w = capacity
        for i in range(len(weights) - 1, -1, -1):
            if taken[i][w]:
                chosen.append(i)
                w -= weights[i]
        chosen.reverse()
        return chosen

    def select(self, payables: Sequence[FinanceItem], budget: float) -> Selection:
        if budget <= 0:
            logger.info(f"Budget {budget} leaves nothing to pay")
            return Selection(failure=Failure.INVALID_BUDGET)
        capacity = self.capacity_for(budget)
        candidates = [p for p in payables if p.is_payable]
        weights = [p.weight for p in candidates]
        values = [p.impact_score for p in candidates]
        picked = [candidates[i] for i in self.solve(weights, values, capacity)]
        selection = Selection(
            items=picked,
            capacity=capacity,
            total_weight=sum(p.weight for p in picked),
            total_value=sum(p.impact_score for p in picked),
        )
        logger.debug(
            f"Selected {len(picked)}/{len(candidates)} payables: weight {selection.total_weight}"
            f"/{capacity}, impact {selection.total_value}"
        )
        return selection
