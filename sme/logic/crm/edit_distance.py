"""Edit (Levenshtein) distance with unit insert/delete/substitute costs."""
from __future__ import annotations

__all__ = ["edit_distance", "EditDistanceMatcher"]


def edit_distance(a: str, b: str) -> int:
    """Two-row dynamic program, O(len(a) * len(b)) time."""
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a  # keep the rows as short as possible
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current[j] = min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost)
        previous = current
    return previous[-1]


class EditDistanceMatcher:
    def __init__(self, case_insensitive: bool = True):
        self.case_insensitive = case_insensitive

    def _fold(self, s: str) -> str:
        s = s or ""
        return s.lower() if self.case_insensitive else s

    def distance(self, a: str, b: str) -> int:
        return edit_distance(self._fold(a), self._fold(b))
