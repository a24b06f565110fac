"""Finance ledger: receivables and payables, due-date queries and bill selection."""
import heapq
import logging
from datetime import date, timedelta
from typing import List, Optional

from sme.domain.FinanceItem import FinanceItem
from sme.logic.finance.budget import BudgetSelector, Selection

logger = logging.getLogger(__name__)


class FinanceLedger:
    def __init__(self, selector: Optional[BudgetSelector] = None):
        self._next_id = 1
        self._items: List[FinanceItem] = []
        self._selector = selector or BudgetSelector()

    def _store(self, item: FinanceItem) -> FinanceItem:
        self._next_id += 1
        self._items.append(item)
        logger.debug(f"Recorded {item}")
        return item

    def add_receivable(self, amount: float, due_date: date) -> FinanceItem:
        return self._store(FinanceItem.receivable(self._next_id, amount, due_date))

    def add_payable(self, amount: float, due_date: date, impact_score: int) -> FinanceItem:
        return self._store(FinanceItem.payable(self._next_id, amount, due_date, impact_score))

    def receivables(self) -> List[FinanceItem]:
        return [i for i in self._items if not i.is_payable]

    def payables(self) -> List[FinanceItem]:
        return [i for i in self._items if i.is_payable]

    def count(self) -> int:
        return len(self._items)

    def upcoming(self, limit: int) -> List[FinanceItem]:
        '''The limit earliest items by (due date, id).'''
        if limit <= 0:
            return []
        return heapq.nsmallest(limit, self._items, key=lambda i: (i.due_date, i.id))

    def project_cash_flow(self, current_cash: float, days: int, today: Optional[date] = None) -> float:
        '''
        Cash on hand after everything due within the next days: receivables
        add, payables subtract. Items already past due count as well.
        '''
        horizon = (today or date.today()) + timedelta(days=days)
        return current_cash + sum(i.signed_amount for i in self._items if i.due_date <= horizon)

    def select_payables(self, budget: float) -> Selection:
        return self._selector.select(self.payables(), budget)

    def pick_payables_to_pay(self, budget: float) -> List[FinanceItem]:
        '''
        Payables to settle now so that total impact is maximal within budget.
        '''
        return self.select_payables(budget).items
