from fastapi import APIRouter, Depends, Response

from app.deps import get_bill_by_token
from app.schemas import AddParticipantIn
from app.serializers import serialize_participant
from app.store import BillStore, get_store

router = APIRouter()


@router.post("/bills/{access_token}/participants", status_code=201)
def add_participant(
    access_token: str,
    data: AddParticipantIn,
    response: Response,
    store: BillStore = Depends(get_store),
):
    bill = get_bill_by_token(access_token, store)
    participant = bill.add_participant(data.name)
    if participant is None:
        # Blank names are ignored
        response.status_code = 200
        return None
    return serialize_participant(participant)


@router.delete("/bills/{access_token}/participants/{participant_id}", status_code=204)
def remove_participant(
    access_token: str,
    participant_id: str,
    store: BillStore = Depends(get_store),
):
    bill = get_bill_by_token(access_token, store)
    bill.remove_participant(participant_id)
    return None
