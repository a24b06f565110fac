"""Task domain entity: a unit of work with a duration in days."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    id: int
    name: str
    duration_days: int

    def __str__(self) -> str:
        return f"[Task#{self.id}] {self.name} ({self.duration_days} d)"

    def to_dict(self):
        return {"id": self.id, "name": self.name, "duration_days": self.duration_days}
