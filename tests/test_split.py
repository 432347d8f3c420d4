import pytest

from app.models import Item, Participant
from app.split import compute_summary, is_fixed_charge, item_share, normalize_items


def test_shared_item_is_split_between_assignees(sample_items, alice, bob):
    summary = compute_summary(sample_items, [alice, bob])

    assert summary["perPerson"]["A"]["total"] == pytest.approx(15.485)
    assert summary["perPerson"]["B"]["total"] == pytest.approx(2.495)
    assert summary["total"] == pytest.approx(17.98)


def test_per_person_items_keep_original_order(sample_items, alice, bob):
    summary = compute_summary(sample_items, [alice, bob])

    assert [i["id"] for i in summary["perPerson"]["A"]["items"]] == ["item-1", "item-2"]
    assert summary["perPerson"]["B"]["items"] == [
        {"id": "item-2", "name": "Fries", "price": 4.99, "quantity": 1, "share": pytest.approx(2.495)},
    ]


def test_quantity_multiplies_unit_price(alice, bob):
    items = [Item(id="1", name="Beer", price=6.0, quantity=3, assigned_to=["A", "B"])]

    summary = compute_summary(items, [alice, bob])

    assert summary["total"] == pytest.approx(18.0)
    assert summary["perPerson"]["A"]["total"] == pytest.approx(9.0)
    assert summary["perPerson"]["A"]["items"][0]["quantity"] == 3


def test_unassigned_item_counts_only_toward_grand_total(alice, bob):
    items = [
        Item(id="1", name="Pasta", price=10.0, assigned_to=["A"]),
        Item(id="2", name="Wine", price=30.0),
    ]

    summary = compute_summary(items, [alice, bob])

    assert summary["total"] == pytest.approx(40.0)
    assert summary["perPerson"]["A"]["total"] == pytest.approx(10.0)
    assert summary["perPerson"]["B"] == {"name": "Bob", "total": 0.0, "items": []}


def test_shares_of_an_item_add_up_to_its_cost():
    people = [Participant(id=str(n), name=f"P{n}") for n in range(3)]
    item = Item(id="1", name="Pizza", price=10.0, quantity=1, assigned_to=["0", "1", "2"])

    summary = compute_summary([item], people)

    shares = [summary["perPerson"][p.id]["items"][0]["share"] for p in people]
    assert sum(shares) == pytest.approx(10.0)


@pytest.mark.parametrize("name", ["Tax", "tax", "TIP", " Tip "])
def test_fixed_charges_go_to_everyone(name, alice, bob):
    items = [Item(id="x", name=name, price=4.0, assigned_to=["A"])]

    summary = compute_summary(items, [alice, bob])

    assert summary["perPerson"]["A"]["total"] == pytest.approx(2.0)
    assert summary["perPerson"]["B"]["total"] == pytest.approx(2.0)


def test_is_fixed_charge_requires_exact_name():
    assert is_fixed_charge("Tax")
    assert not is_fixed_charge("Taxi")
    assert not is_fixed_charge("Tip jar donation")


def test_normalize_does_not_mutate_input(alice, bob):
    tax = Item(id="tax", name="Tax", price=2.0)

    normalized = normalize_items([tax], [alice, bob])

    assert normalized[0].assigned_to == ["A", "B"]
    assert tax.assigned_to == []


def test_normalize_drops_ids_not_on_roster(alice):
    item = Item(id="1", name="Salad", price=8.0, assigned_to=["A", "gone"])

    assert normalize_items([item], [alice])[0].assigned_to == ["A"]


def test_summary_is_deterministic(sample_items, alice, bob):
    assert compute_summary(sample_items, [alice, bob]) == compute_summary(sample_items, [alice, bob])


def test_grand_total_ignores_roster_size(sample_items, alice, bob):
    carol = Participant(id="C", name="Carol")

    two = compute_summary(sample_items, [alice, bob])
    three = compute_summary(sample_items, [alice, bob, carol])

    assert two["total"] == three["total"]


def test_item_share_of_unassigned_item_is_zero():
    assert item_share(Item(id="1", name="Soda", price=2.49)) == 0.0
