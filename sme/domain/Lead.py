"""Lead domain entity: a sales contact. id is 0 until the lead is saved."""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Lead:
    name: str
    email: str = ""
    phone: str = ""
    id: int = 0

    @property
    def is_saved(self) -> bool:
        return self.id > 0

    def with_id(self, id: int) -> "Lead":
        return replace(self, id=id)

    def __str__(self) -> str:
        return f"[Lead#{self.id}] {self.name} | {self.email} | {self.phone}"

    def to_dict(self):
        return {"id": self.id, "name": self.name, "email": self.email, "phone": self.phone}
