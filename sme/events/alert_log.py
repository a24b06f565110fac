"""In-memory log of recent store alerts.

Subscribes to an EventBus for:
  - inventory.low_stock
  - crm.possible_duplicate

and keeps a bounded buffer of flattened events that a caller can poll.

  * Each event gets an auto-increment integer id (cursor) so callers can ask
    only for newer events (since=<last_id_seen>).
  * The buffer is guarded by a Lock; event callbacks may run on whatever
    thread mutates a store.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone
import logging

from .Event_Bus import EventBus, INVENTORY_LOW_STOCK, CRM_POSSIBLE_DUPLICATE

logger = logging.getLogger(__name__)

MAX_EVENTS = 300


class AlertLog:
    def __init__(self, max_events: int = MAX_EVENTS):
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self.max_events = max_events
        self._buses: List[EventBus] = []

    def attach(self, bus: EventBus) -> "AlertLog":
        """Idempotent: subscribe to a bus once."""
        if bus in self._buses:
            return self
        bus.subscribe(INVENTORY_LOW_STOCK, self.record)
        bus.subscribe(CRM_POSSIBLE_DUPLICATE, self.record)
        self._buses.append(bus)
        return self

    def detach(self, bus: EventBus) -> None:
        bus.unsubscribe(INVENTORY_LOW_STOCK, self.record)
        bus.unsubscribe(CRM_POSSIBLE_DUPLICATE, self.record)
        if bus in self._buses:
            self._buses.remove(bus)

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        evt: Dict[str, Any] = {
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat()
        }
        if isinstance(payload, dict):
            product = payload.get('product')
            if product is not None:
                evt['product_id'] = getattr(product, 'id', None)
                evt['name'] = getattr(product, 'name', '')
                evt['stock'] = getattr(product, 'stock', None)
            lead = payload.get('lead')
            if lead is not None:
                evt['name'] = getattr(lead, 'name', '')
                evt['email'] = getattr(lead, 'email', '')
                evt['match_ids'] = [getattr(m, 'id', None) for m in payload.get('matches', [])]
            for k in ('remaining', 'threshold', 'max_distance'):
                if k in payload:
                    evt[k] = payload[k]
        with self._lock:
            evt['id'] = self._next_id
            self._next_id += 1
            self._events.append(evt)
            # Trim buffer
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]
        logger.debug(f"Recorded alert {evt['id']}: {event_name}")

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive).

        If since is None, returns every buffered event. The response includes
        next_cursor (largest id) so callers can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)


__all__ = ['AlertLog', 'MAX_EVENTS']
