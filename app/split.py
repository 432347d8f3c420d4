"""Bill allocation: per-participant shares of receipt items.

Tax and tip rows always belong to every participant. That rule is applied
here, on every computation, instead of being written back to stored items.
"""

from app.models import Item, Participant

FIXED_CHARGE_NAMES = ("tax", "tip")


def is_fixed_charge(name: str) -> bool:
    """True for rows named Tax or Tip (any case)."""
    return name.strip().lower() in FIXED_CHARGE_NAMES


def normalize_items(items: list[Item], participants: list[Participant]) -> list[Item]:
    """Return copies of items with assignments resolved against the roster.

    Fixed charges are assigned to every participant in roster order; other
    items keep their assignment minus ids that are no longer on the roster.
    """
    roster = [p.id for p in participants]
    known = set(roster)

    normalized = []
    for item in items:
        if is_fixed_charge(item.name):
            assigned = list(roster)
        else:
            assigned = [pid for pid in item.assigned_to if pid in known]
        normalized.append(item.model_copy(update={"assigned_to": assigned}))
    return normalized


def item_share(item: Item) -> float:
    """Cost carried by each participant assigned to the item."""
    if not item.assigned_to:
        return 0.0
    return item.line_total / len(item.assigned_to)


def compute_summary(items: list[Item], participants: list[Participant]) -> dict:
    """Compute the grand total and each participant's owed total.

    Unassigned items still count toward the grand total but toward nobody's
    per-person total.

    Returns {"total": float, "perPerson": {participantId: {...}}}.
    """
    normalized = normalize_items(items, participants)

    summary: dict = {
        "total": sum(item.line_total for item in normalized),
        "perPerson": {},
    }

    for person in participants:
        person_items = []
        total = 0.0
        for item in normalized:
            if person.id not in item.assigned_to:
                continue
            share = item_share(item)
            total += share
            person_items.append({
                "id": item.id,
                "name": item.name,
                "price": item.price,
                "quantity": item.quantity,
                "share": share,
            })
        summary["perPerson"][person.id] = {
            "name": person.name,
            "total": total,
            "items": person_items,
        }

    return summary
