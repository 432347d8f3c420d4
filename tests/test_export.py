from datetime import date

from app.export import format_text_summary
from app.models import Item, Participant
from app.split import compute_summary


def test_text_summary_layout():
    alice = Participant(id="A", name="Alice")
    bob = Participant(id="B", name="Bob")
    items = [
        Item(id="1", name="Steak", price=20.0, assigned_to=["A"]),
        Item(id="2", name="Beer", price=5.0, quantity=2, assigned_to=["A", "B"]),
        Item(id="tax", name="Tax", price=3.0),
    ]
    summary = compute_summary(items, [alice, bob])

    text = format_text_summary(summary, [alice, bob], on=date(2024, 5, 17))

    assert text == (
        "Bill Split Summary\n"
        "\n"
        "Date: 2024-05-17\n"
        "\n"
        "Alice: $26.50\n"
        "  - Steak: $20.00\n"
        "  - Beer (x2): $5.00\n"
        "  - Tax: $1.50\n"
        "\n"
        "Bob: $6.50\n"
        "  - Beer (x2): $5.00\n"
        "  - Tax: $1.50\n"
        "\n"
        "Total: $33.00"
    )


def test_text_summary_for_participant_with_nothing_assigned():
    alice = Participant(id="A", name="Alice")
    summary = compute_summary([Item(id="1", name="Soup", price=4.0)], [alice])

    text = format_text_summary(summary, [alice], on=date(2024, 1, 1))

    assert "Alice: $0.00\n\nTotal: $4.00" in text
