"""Post-processing shared by the receipt providers."""

import base64
import binascii
import json
import re

from app.receipt.base import ReceiptLineItem, ReceiptParseError

# Rows containing any of these are receipt bookkeeping, not products.
# Tax and tip are entered by hand when items are finalized.
NON_ITEM_KEYWORDS = ("total", "subtotal", "cash", "change", "payment", "tax", "tip")

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")
_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)
_PRICE_NOISE = re.compile(r"[^\d.\-]")


def parse_items_payload(text: str) -> list[dict]:
    """Read the `items` list out of a model response.

    Models sometimes wrap the JSON in prose or code fences, so when the whole
    text is not JSON the first {...} span is tried instead.
    """
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError):
        match = _JSON_OBJECT.search(text or "")
        if not match:
            raise ReceiptParseError("Response did not contain JSON")
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise ReceiptParseError(f"Response JSON is malformed: {e}") from e

    items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise ReceiptParseError("Response JSON has no items list")
    return items


def parse_price(value) -> float:
    if isinstance(value, bool):
        raise ReceiptParseError(f"Invalid price: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        cleaned = _PRICE_NOISE.sub("", value.replace(",", ""))
        try:
            return float(cleaned)
        except ValueError:
            pass
    raise ReceiptParseError(f"Invalid price: {value!r}")


def is_non_item(name: str) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in NON_ITEM_KEYWORDS)


def clean_line_items(raw_items: list) -> list[ReceiptLineItem]:
    """Filter out bookkeeping rows, backfill ids and coerce prices."""
    cleaned: list[ReceiptLineItem] = []
    for raw in raw_items:
        if isinstance(raw, ReceiptLineItem):
            raw = raw.model_dump()
        if not isinstance(raw, dict):
            continue
        name = str(raw.get("name") or "").strip()
        if not name or is_non_item(name):
            continue

        item_id = raw.get("id")
        cleaned.append(ReceiptLineItem(
            id=str(item_id) if item_id else f"item-{len(cleaned) + 1}",
            name=name,
            price=parse_price(raw.get("price")),
            quantity=_parse_quantity(raw.get("quantity")),
        ))
    return cleaned


def _parse_quantity(value) -> int | None:
    try:
        quantity = int(value)
    except (TypeError, ValueError):
        return None
    return quantity if quantity >= 1 else None


def decode_data_url(image: str) -> tuple[bytes, str]:
    """Split a data URL (or bare base64 string) into bytes and media type."""
    content_type = "image/jpeg"
    payload = image.strip()

    match = _DATA_URL.match(payload)
    if match:
        content_type = match.group("mime")
        payload = match.group("data")

    try:
        image_bytes = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError("Image is not valid base64") from e
    return image_bytes, content_type
