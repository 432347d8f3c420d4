import uuid

from pydantic import BaseModel, Field


def new_uuid():
    return str(uuid.uuid4())


class Participant(BaseModel):
    id: str = Field(default_factory=new_uuid)
    name: str


class Item(BaseModel):
    id: str
    name: str
    price: float  # unit price in display units (e.g. 12.99)
    quantity: int = Field(default=1, ge=1)
    assigned_to: list[str] = []  # ordered, no duplicates; empty = unassigned

    @property
    def line_total(self) -> float:
        return self.price * self.quantity
