"""Lead book with fuzzy duplicate detection on name and email."""
import logging
from typing import List, Optional, Tuple

from sme.domain.Lead import Lead
from sme.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from sme.events.event_helpers import publish_possible_duplicate
from sme.logic.crm.edit_distance import EditDistanceMatcher
from sme.utilities import config

logger = logging.getLogger(__name__)


class LeadDeduplicator:
    def __init__(self, matcher: Optional[EditDistanceMatcher] = None, event_bus: Optional[EventBus] = None):
        self._next_id = 1
        self._leads: List[Lead] = []
        self._matcher = matcher or EditDistanceMatcher(case_insensitive=True)
        self._event_bus = event_bus or GLOBAL_EVENT_BUS

    def set_event_bus(self, bus: EventBus):
        self._event_bus = bus
        return self

    def add_lead(self, lead: Lead) -> Lead:
        '''
        Saves a copy of the lead under the next id and returns it.
        '''
        saved = lead.with_id(self._next_id)
        self._next_id += 1
        self._leads.append(saved)
        return saved

    def list_leads(self) -> List[Lead]:
        return list(self._leads)

    def count(self) -> int:
        return len(self._leads)

    def find_similar(self, candidate: Lead, max_distance: int) -> List[Lead]:
        '''
        Stored leads whose name or email is within max_distance edits of the
        candidate's (case-insensitive), in the order they were saved.
        '''
        name = (candidate.name or "").lower()
        email = (candidate.email or "").lower()
        similar = []
        for lead in self._leads:
            d_name = self._matcher.distance((lead.name or "").lower(), name)
            d_email = self._matcher.distance((lead.email or "").lower(), email)
            if min(d_name, d_email) <= max_distance:
                similar.append(lead)
        return similar

    def add_lead_checked(self, lead: Lead, max_distance: Optional[int] = None) -> Tuple[Lead, List[Lead]]:
        '''
        Looks up possible duplicates, announces them, then saves the lead anyway.
        Returns (saved lead, possible duplicates).
        '''
        if max_distance is None:
            max_distance = config.LEAD_MAX_DISTANCE
        similar = self.find_similar(lead, max_distance)
        if similar:
            logger.info(f"Lead '{lead.name}' resembles {len(similar)} saved lead(s)")
            publish_possible_duplicate(lead, similar, max_distance, bus=self._event_bus)
        return self.add_lead(lead), similar
