from datetime import date as date_type

from app.models import Participant


def format_text_summary(summary: dict, participants: list[Participant], on: date_type | None = None) -> str:
    """Render a computed summary as shareable plain text."""
    on = on or date_type.today()
    lines = ["Bill Split Summary", "", f"Date: {on.isoformat()}", ""]

    for person in participants:
        entry = summary["perPerson"].get(person.id, {"total": 0.0, "items": []})
        lines.append(f"{person.name}: ${entry['total']:.2f}")
        for item in entry["items"]:
            qty = f" (x{item['quantity']})" if item["quantity"] > 1 else ""
            lines.append(f"  - {item['name']}{qty}: ${item['share']:.2f}")
        lines.append("")

    lines.append(f"Total: ${summary['total']:.2f}")
    return "\n".join(lines)
