"""Event helper utilities.

This module provides helper functions for publishing store events, either on
the global event bus or on a bus handed in by the caller.

Quick import:
    from sme.events.event_helpers import (
        publish_low_stock, publish_possible_duplicate,
        INVENTORY_LOW_STOCK, CRM_POSSIBLE_DUPLICATE
    )
"""
from __future__ import annotations
from typing import Any, Iterable, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    INVENTORY_LOW_STOCK, CRM_POSSIBLE_DUPLICATE
)

__all__ = [
    'publish_low_stock', 'publish_possible_duplicate',
    'INVENTORY_LOW_STOCK', 'CRM_POSSIBLE_DUPLICATE'
]


def publish_low_stock(product: Any, remaining: int, threshold: int, bus: Optional[EventBus] = None):
    """Publish an inventory.low_stock event."""
    (bus or GLOBAL_EVENT_BUS).publish(INVENTORY_LOW_STOCK, {
        'product': product,
        'remaining': remaining,
        'threshold': threshold
    })


def publish_possible_duplicate(lead: Any, matches: Iterable[Any], max_distance: int,
                               bus: Optional[EventBus] = None):
    """Publish a crm.possible_duplicate event for a lead about to be saved."""
    (bus or GLOBAL_EVENT_BUS).publish(CRM_POSSIBLE_DUPLICATE, {
        'lead': lead,
        'matches': list(matches),
        'max_distance': max_distance
    })
