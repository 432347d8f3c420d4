from app.bills import Bill
from app.models import Item, Participant
from app.receipt.base import ReceiptLineItem


def serialize_participant(participant: Participant) -> dict:
    return {
        "id": participant.id,
        "name": participant.name,
    }


def serialize_item(item: Item) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "price": item.price,
        "quantity": item.quantity,
        "assignedTo": list(item.assigned_to),
    }


def serialize_line_item(item: ReceiptLineItem) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "price": item.price,
        "quantity": item.quantity or 1,
        "assignedTo": [],
    }


def serialize_bill(bill: Bill, is_creator: bool = False) -> dict:
    return {
        "access_token": bill.access_token,
        "participants": [serialize_participant(p) for p in bill.participants],
        "items": [serialize_item(i) for i in bill.normalized_items()],
        "createdAt": bill.created_at.isoformat(),
        "updatedAt": bill.updated_at.isoformat(),
        "is_creator": is_creator,
    }
