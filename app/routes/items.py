from fastapi import APIRouter, Depends

from app.deps import get_bill_by_token
from app.models import Item
from app.schemas import FinalizeItemsIn, ToggleAssignmentIn
from app.serializers import serialize_item
from app.store import BillStore, get_store

router = APIRouter()


@router.put("/bills/{access_token}/items")
def finalize_items(
    access_token: str,
    data: FinalizeItemsIn,
    store: BillStore = Depends(get_store),
):
    bill = get_bill_by_token(access_token, store)
    items = [
        Item(id=i.id or "", name=i.name, price=i.price, quantity=i.quantity)
        for i in data.items
    ]
    bill.finalize_items(items, tax=data.tax, tip=data.tip)
    return [serialize_item(i) for i in bill.normalized_items()]


@router.post("/bills/{access_token}/items/{item_id}/toggle")
def toggle_assignment(
    access_token: str,
    item_id: str,
    data: ToggleAssignmentIn,
    store: BillStore = Depends(get_store),
):
    bill = get_bill_by_token(access_token, store)
    item = bill.toggle_assignment(item_id, data.participant_id)
    return serialize_item(item)


@router.post("/bills/{access_token}/split-evenly")
def split_evenly(
    access_token: str,
    store: BillStore = Depends(get_store),
):
    bill = get_bill_by_token(access_token, store)
    bill.split_evenly()
    return [serialize_item(i) for i in bill.normalized_items()]
