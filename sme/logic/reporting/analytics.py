"""Quick analytics across the stores.

Returns plain dicts so callers can render them however they like.
"""
from __future__ import annotations
from typing import Any, Dict, Optional

from sme.utilities import config

__all__ = ["compute_quick_analytics", "compute_low_stock_snapshot"]

def compute_low_stock_snapshot(inventory, limit: Optional[int] = None):
    """Low-stock products as dicts, lowest stock first."""
    products = inventory.low_stock_alerts(inventory.count() if limit is None else limit)
    return [
        {
            'id': p.id,
            'name': p.name,
            'stock': p.stock,
            'reorder_level': p.reorder_level,
            'shortfall': p.reorder_level - p.stock,
        }
        for p in products
    ]


def compute_quick_analytics(inventory, finance, leads, workflow, *,
                            upcoming_limit: Optional[int] = None) -> Dict[str, Any]:
    """Counts per store plus the next finance items due.

    upcoming_limit defaults to config.ANALYTICS_UPCOMING_LIMIT.

    Structure:
    {
      'products': int, 'low_stock': int, 'leads': int, 'tasks': int,
      'upcoming': [ {id, kind, amount, due_date[, impact_score]}, ... ]
    }
    """
    if upcoming_limit is None:
        upcoming_limit = config.ANALYTICS_UPCOMING_LIMIT
    return {
        'products': inventory.count(),
        'low_stock': len(inventory.low_stock_alerts(inventory.count())),
        'leads': leads.count(),
        'tasks': workflow.task_count(),
        'upcoming': [item.to_dict() for item in finance.upcoming(upcoming_limit)],
    }
