import logging

from fastapi import Depends, HTTPException, Request

from app.bills import Bill
from app.store import BillStore, get_store

logger = logging.getLogger("moneymate")


def get_bill_by_token(
    access_token: str,
    store: BillStore = Depends(get_store),
) -> Bill:
    bill = store.get(access_token)
    if not bill:
        raise HTTPException(status_code=404, detail="Bill not found")
    return bill


def get_ctk(request: Request) -> str | None:
    """Read the cookie tracking key from the request."""
    return getattr(request.state, "ctk", None)


def verify_creator(bill: Bill, request: Request) -> None:
    """Check that the request comes from the browser session that created the bill."""
    ctk = get_ctk(request)
    if ctk and bill.creator_ctk and ctk == bill.creator_ctk:
        return

    logger.warning("Creator verification failed", extra={"extra_data": {"access_token": bill.access_token}})
    raise HTTPException(status_code=403, detail="Only the bill creator can do this")
