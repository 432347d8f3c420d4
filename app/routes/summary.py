from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.deps import get_bill_by_token
from app.export import format_text_summary
from app.store import BillStore, get_store

router = APIRouter()


@router.get("/bills/{access_token}/summary")
def get_summary(
    access_token: str,
    store: BillStore = Depends(get_store),
):
    bill = get_bill_by_token(access_token, store)
    return bill.summary()


@router.get("/bills/{access_token}/summary.txt", response_class=PlainTextResponse)
def get_text_summary(
    access_token: str,
    store: BillStore = Depends(get_store),
):
    bill = get_bill_by_token(access_token, store)
    return format_text_summary(bill.summary(), list(bill.participants))
