from pydantic import BaseModel, Field


# --- Bills ---

class CreateBillIn(BaseModel):
    participants: list[str] = []  # names; defaults to a single "You"


# --- Participants ---

class AddParticipantIn(BaseModel):
    name: str


# --- Items ---

class ItemIn(BaseModel):
    id: str | None = None
    name: str
    price: float = Field(allow_inf_nan=False)
    quantity: int = Field(default=1, ge=1)


class FinalizeItemsIn(BaseModel):
    items: list[ItemIn]
    tax: float = Field(default=0, ge=0, allow_inf_nan=False)
    tip: float = Field(default=0, ge=0, allow_inf_nan=False)


class ToggleAssignmentIn(BaseModel):
    participant_id: str = Field(alias="participantId")

    model_config = {"populate_by_name": True}


# --- Receipts ---

class AnalyzeReceiptIn(BaseModel):
    image: str | None = None  # data URL or bare base64
