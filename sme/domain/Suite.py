"""BusinessSuite: one instance of each store, wired to a shared event bus."""
from typing import Any, Dict, Optional

from sme.domain.Finance import FinanceLedger
from sme.domain.Inventory import InventoryStore
from sme.domain.Leads import LeadDeduplicator
from sme.domain.Workflow import DependencyGraph
from sme.events.Event_Bus import EventBus
from sme.events.alert_log import AlertLog
from sme.logic.reporting.analytics import compute_quick_analytics
from sme.utilities import config


class BusinessSuite:
    def __init__(self, event_bus: Optional[EventBus] = None):
        # Each suite gets its own bus unless one is shared on purpose
        self.event_bus = event_bus or EventBus()
        self.inventory = InventoryStore(event_bus=self.event_bus)
        self.finance = FinanceLedger()
        self.leads = LeadDeduplicator(event_bus=self.event_bus)
        self.workflow = DependencyGraph()
        self.alerts = AlertLog().attach(self.event_bus)

    def summary(self, upcoming_limit: Optional[int] = None) -> Dict[str, Any]:
        return compute_quick_analytics(
            self.inventory, self.finance, self.leads, self.workflow,
            upcoming_limit=upcoming_limit,
        )

    def __repr__(self) -> str:
        s = self.summary()
        return (f"BusinessSuite(products={s['products']}, leads={s['leads']}, "
                f"tasks={s['tasks']}, finance_items={self.finance.count()})")
