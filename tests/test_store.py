from datetime import datetime, timedelta

from app.store import BillStore


def test_create_and_get():
    store = BillStore()

    bill = store.create(creator_ctk="ctk-1", participant_names=["Alice"])

    assert store.get(bill.access_token) is bill
    assert bill.creator_ctk == "ctk-1"
    assert len(bill.access_token) >= 20


def test_access_tokens_are_unique():
    store = BillStore()

    tokens = {store.create().access_token for _ in range(20)}

    assert len(tokens) == 20


def test_delete():
    store = BillStore()
    bill = store.create()

    assert store.delete(bill.access_token)
    assert store.get(bill.access_token) is None
    assert not store.delete(bill.access_token)


def test_expired_bills_are_purged_on_create():
    store = BillStore(ttl=timedelta(hours=1))
    stale = store.create()
    stale.last_seen_at = datetime.utcnow() - timedelta(hours=2)

    store.create()

    assert len(store) == 1
    assert store.get(stale.access_token) is None


def test_get_drops_expired_bill():
    store = BillStore(ttl=timedelta(minutes=5))
    bill = store.create()
    bill.last_seen_at = datetime.utcnow() - timedelta(minutes=10)

    assert store.get(bill.access_token) is None
    assert len(store) == 0


def test_reading_a_bill_keeps_it_alive():
    store = BillStore(ttl=timedelta(hours=1))
    bill = store.create()
    bill.last_seen_at = datetime.utcnow() - timedelta(minutes=50)

    assert store.get(bill.access_token) is bill
    bill.updated_at = datetime.utcnow() - timedelta(hours=2)

    assert store.purge_expired() == 0
    assert store.get(bill.access_token) is bill
