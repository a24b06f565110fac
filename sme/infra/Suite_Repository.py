"""Suite repository helpers: build a BusinessSuite from caller-supplied data."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from sme.domain.Lead import Lead
from sme.domain.Suite import BusinessSuite
from sme.events.Event_Bus import EventBus
from sme.utilities.validators import SuiteInput

logger = logging.getLogger(__name__)


def load_suite(data: Dict[str, Any], event_bus: Optional[EventBus] = None) -> BusinessSuite:
    """Validate data and populate a fresh suite.

    Raises pydantic.ValidationError for malformed input and ValueError when a
    dependency would close a cycle.
    """
    parsed = SuiteInput.model_validate(data)
    suite = BusinessSuite(event_bus=event_bus)

    for p in parsed.products:
        suite.inventory.add_product(p.name, p.category, p.price, p.stock, p.reorder_level)
    for r in parsed.receivables:
        suite.finance.add_receivable(r.amount, r.due_date)
    for p in parsed.payables:
        suite.finance.add_payable(p.amount, p.due_date, p.impact_score)
    for l in parsed.leads:
        suite.leads.add_lead(Lead(l.name, l.email, l.phone))

    task_ids = {}
    for t in parsed.tasks:
        task_ids[t.name] = suite.workflow.add_task(t.name, t.duration_days).id
    for dep in parsed.dependencies:
        outcome = suite.workflow.add_dependency(task_ids[dep.task], task_ids[dep.depends_on])
        if not outcome:
            raise ValueError(
                f"Dependency '{dep.task}' -> '{dep.depends_on}' rejected: {outcome.failure.value}"
            )

    logger.info(
        f"Loaded {len(parsed.products)} products, "
        f"{len(parsed.receivables) + len(parsed.payables)} finance items, "
        f"{len(parsed.leads)} leads, {len(parsed.tasks)} tasks"
    )
    return suite


def read_suite_from_json(path: Union[str, Path], event_bus: Optional[EventBus] = None) -> BusinessSuite:
    """Load a suite from a JSON file with the same structure as load_suite expects."""
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return load_suite(data, event_bus=event_bus)
