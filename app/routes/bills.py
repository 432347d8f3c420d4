import logging

from fastapi import APIRouter, Depends, Request

from app.deps import get_bill_by_token, get_ctk, verify_creator
from app.ratelimit import CREATE_BILL_RATE_LIMIT, limiter
from app.schemas import CreateBillIn
from app.serializers import serialize_bill
from app.store import BillStore, get_store

logger = logging.getLogger("moneymate")

router = APIRouter()


@router.post("/bills", status_code=201)
@limiter.limit(CREATE_BILL_RATE_LIMIT)
def create_bill(request: Request, data: CreateBillIn | None = None, store: BillStore = Depends(get_store)):
    names = data.participants if data else []
    bill = store.create(creator_ctk=get_ctk(request), participant_names=names)
    logger.info(
        "Bill created",
        extra={"extra_data": {"access_token": bill.access_token, "participants": len(bill.participants)}},
    )
    return serialize_bill(bill, is_creator=True)


@router.get("/bills/{access_token}")
def get_bill(
    access_token: str,
    request: Request,
    store: BillStore = Depends(get_store),
):
    bill = get_bill_by_token(access_token, store)
    ctk = get_ctk(request)
    return serialize_bill(bill, is_creator=bool(ctk) and ctk == bill.creator_ctk)


@router.post("/bills/{access_token}/reset")
def reset_bill(
    access_token: str,
    request: Request,
    store: BillStore = Depends(get_store),
):
    bill = get_bill_by_token(access_token, store)
    bill.reset()
    ctk = get_ctk(request)
    return serialize_bill(bill, is_creator=bool(ctk) and ctk == bill.creator_ctk)


@router.delete("/bills/{access_token}", status_code=204)
def delete_bill(
    access_token: str,
    request: Request,
    store: BillStore = Depends(get_store),
):
    bill = get_bill_by_token(access_token, store)
    verify_creator(bill, request)
    store.delete(access_token)
    logger.info("Bill deleted", extra={"extra_data": {"access_token": access_token}})
    return None
