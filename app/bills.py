import logging
import math
import threading
from datetime import datetime

from app.models import Item, Participant
from app.split import compute_summary, is_fixed_charge, normalize_items

logger = logging.getLogger("moneymate")

DEFAULT_PARTICIPANT_NAME = "You"
TAX_ITEM_ID = "tax"
TIP_ITEM_ID = "tip"


def _is_positive_amount(value: float) -> bool:
    return math.isfinite(value) and value > 0


class BillError(Exception):
    status_code = 400


class NotFoundError(BillError):
    status_code = 404


class RosterError(BillError):
    status_code = 409


class ItemValidationError(BillError):
    status_code = 400


class Bill:
    """A bill being split: the participant roster and the finalized items.

    Mutations run under the bill's lock, one at a time.
    """

    def __init__(
        self,
        access_token: str,
        creator_ctk: str | None = None,
        participant_names: list[str] | None = None,
    ):
        self.access_token = access_token
        self.creator_ctk = creator_ctk
        self.participants: list[Participant] = []
        self.items: list[Item] = []
        self.created_at = datetime.utcnow()
        self.updated_at = self.created_at
        self.last_seen_at = self.created_at
        self._lock = threading.RLock()

        names = [n.strip() for n in (participant_names or []) if n.strip()]
        for name in names or [DEFAULT_PARTICIPANT_NAME]:
            self.participants.append(Participant(name=name))

    def _touch(self) -> None:
        self.updated_at = datetime.utcnow()
        self.last_seen_at = self.updated_at

    def _participant_ids(self) -> list[str]:
        return [p.id for p in self.participants]

    def _get_item(self, item_id: str) -> Item:
        for item in self.items:
            if item.id == item_id:
                return item
        raise NotFoundError("Item not found")

    def _get_participant(self, participant_id: str) -> Participant:
        for participant in self.participants:
            if participant.id == participant_id:
                return participant
        raise NotFoundError("Participant not found")

    # --- Roster ---

    def add_participant(self, name: str) -> Participant | None:
        name = name.strip()
        if not name:
            return None
        with self._lock:
            participant = Participant(name=name)
            self.participants.append(participant)
            self._touch()
        logger.info("Participant added", extra={"extra_data": {"participant_id": participant.id}})
        return participant

    def remove_participant(self, participant_id: str) -> None:
        with self._lock:
            participant = self._get_participant(participant_id)
            if len(self.participants) == 1:
                raise RosterError("At least 1 participant required")

            self.participants.remove(participant)
            for item in self.items:
                if participant_id in item.assigned_to:
                    item.assigned_to = [pid for pid in item.assigned_to if pid != participant_id]
            self._touch()
        logger.info("Participant removed", extra={"extra_data": {"participant_id": participant_id}})

    # --- Assignment ---

    def toggle_assignment(self, item_id: str, participant_id: str) -> Item:
        """Flip a participant's membership in an item's assignment.

        Tax and tip rows are left as they are; they always resolve to the
        whole roster.
        """
        with self._lock:
            item = self._get_item(item_id)
            self._get_participant(participant_id)

            if not is_fixed_charge(item.name):
                if participant_id in item.assigned_to:
                    item.assigned_to = [pid for pid in item.assigned_to if pid != participant_id]
                else:
                    item.assigned_to = item.assigned_to + [participant_id]
                self._touch()

            return normalize_items([item], self.participants)[0]

    def split_evenly(self) -> None:
        with self._lock:
            roster = self._participant_ids()
            for item in self.items:
                item.assigned_to = list(roster)
            self._touch()

    # --- Items ---

    def finalize_items(self, items: list[Item], tax: float = 0, tip: float = 0) -> list[Item]:
        """Replace the bill's items with a validated copy of `items`.

        Nothing changes if any row is invalid. Tax and tip, when positive,
        are appended as their own rows.
        """
        if any(not item.name.strip() or not _is_positive_amount(item.price) for item in items):
            raise ItemValidationError("Please fill in all item names and prices before continuing.")
        if not (math.isfinite(tax) and math.isfinite(tip)) or tax < 0 or tip < 0:
            raise ItemValidationError("Tax and tip must be zero or a positive amount.")

        with self._lock:
            previous = {item.id: item.assigned_to for item in self.items}
            roster = set(self._participant_ids())

            finalized: list[Item] = []
            seen: set[str] = set()
            for position, item in enumerate(items, start=1):
                item_id = item.id or f"item-{position}"
                if item_id in (TAX_ITEM_ID, TIP_ITEM_ID):
                    if is_fixed_charge(item.name):
                        # Tax and tip are rebuilt from the amounts below
                        continue
                    raise ItemValidationError(f"Item id \"{item_id}\" is reserved for the {item_id} row")
                if item_id in seen:
                    raise ItemValidationError(f"Duplicate item id: {item_id}")
                seen.add(item_id)
                assigned = [pid for pid in previous.get(item_id, []) if pid in roster]
                finalized.append(item.model_copy(
                    update={"id": item_id, "name": item.name.strip(), "assigned_to": assigned},
                    deep=True,
                ))

            if tax > 0:
                finalized.append(Item(id=TAX_ITEM_ID, name="Tax", price=tax))
            if tip > 0:
                finalized.append(Item(id=TIP_ITEM_ID, name="Tip", price=tip))

            self.items = finalized
            self._touch()

        logger.info(
            "Items finalized",
            extra={"extra_data": {"items_count": len(finalized), "tax": tax, "tip": tip}},
        )
        return finalized

    def reset(self) -> None:
        with self._lock:
            self.items = []
            self._touch()

    def summary(self) -> dict:
        with self._lock:
            return compute_summary(self.items, self.participants)

    def normalized_items(self) -> list[Item]:
        with self._lock:
            return normalize_items(self.items, self.participants)
