import logging
import os
import secrets
import threading
from datetime import datetime, timedelta

from dotenv import load_dotenv

from app.bills import Bill

load_dotenv()

logger = logging.getLogger("moneymate")

BILL_TTL_HOURS = float(os.getenv("BILL_TTL_HOURS", "24"))


def generate_access_token() -> str:
    return secrets.token_urlsafe(18)  # ~24 chars


class BillStore:
    """Process-local registry of bills, keyed by access token.

    Bills neither read nor changed for longer than `ttl` are dropped whenever
    a new one is created.
    """

    def __init__(self, ttl: timedelta | None = None):
        self.ttl = ttl if ttl is not None else timedelta(hours=BILL_TTL_HOURS)
        self._bills: dict[str, Bill] = {}
        self._lock = threading.Lock()

    def create(self, creator_ctk: str | None = None, participant_names: list[str] | None = None) -> Bill:
        self.purge_expired()
        bill = Bill(generate_access_token(), creator_ctk=creator_ctk, participant_names=participant_names)
        with self._lock:
            self._bills[bill.access_token] = bill
        return bill

    def get(self, access_token: str) -> Bill | None:
        with self._lock:
            bill = self._bills.get(access_token)
        if not bill:
            return None
        now = datetime.utcnow()
        if self._is_expired(bill, now):
            self.delete(access_token)
            return None
        bill.last_seen_at = now
        return bill

    def delete(self, access_token: str) -> bool:
        with self._lock:
            return self._bills.pop(access_token, None) is not None

    def purge_expired(self) -> int:
        now = datetime.utcnow()
        with self._lock:
            expired = [token for token, bill in self._bills.items() if self._is_expired(bill, now)]
            for token in expired:
                del self._bills[token]
        if expired:
            logger.info("Expired bills purged", extra={"extra_data": {"count": len(expired)}})
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._bills)

    def _is_expired(self, bill: Bill, now: datetime) -> bool:
        return bill.last_seen_at < now - self.ttl


_store = BillStore()


def get_store() -> BillStore:
    return _store
