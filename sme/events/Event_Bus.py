"""Simple Event Bus / Observer implementation for store alerts.

Event names used so far:
  inventory.low_stock -> payload {"product": Product, "remaining": int, "threshold": int}
  crm.possible_duplicate -> payload {"lead": Lead, "matches": [Lead, ...], "max_distance": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
INVENTORY_LOW_STOCK = "inventory.low_stock"
CRM_POSSIBLE_DUPLICATE = "crm.possible_duplicate"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	"EventBus", "GLOBAL_EVENT_BUS",
	"INVENTORY_LOW_STOCK", "CRM_POSSIBLE_DUPLICATE"
]
