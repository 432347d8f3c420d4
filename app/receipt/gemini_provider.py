import os

from google import genai
from google.genai import types

from app.receipt.base import ReceiptExtractionResult, ReceiptParseError
from app.receipt.parsing import clean_line_items, parse_items_payload

PROMPT = """\
You are a Receipt Analysis AI assistant. Analyze the following receipt image and extract all items and their prices.
IMPORTANT: Maintain the exact prices and item names as they appear on the receipt.

Return a single JSON object with the following structure:
{
  "items": [
    {"id": "unique_id", "name": "exact item name as shown on receipt", "price": price_as_number}
  ]
}

Rules:
1. Extract ONLY actual products/items and their prices from the receipt
2. DO NOT include TOTAL, SUBTOTAL, CASH, PAYMENT, or CHANGE entries
3. Keep item names exactly as they appear on the receipt
4. Convert prices to numbers (remove currency symbols)
5. If an item has a quantity, multiply the price by the quantity"""


def get_api_key() -> str | None:
    return os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_GEMINI_API_KEY")


class GeminiReceiptExtractor:
    """Receipt extraction using Google Gemini vision."""

    def __init__(self, api_key: str | None = None, model: str | None = None):
        self.client = genai.Client(api_key=api_key or get_api_key())
        self.model = model or os.getenv("RECEIPT_MODEL", "gemini-1.5-flash")

    async def extract(self, image_bytes: bytes, content_type: str) -> ReceiptExtractionResult:
        part = types.Part.from_bytes(data=image_bytes, mime_type=content_type or "image/jpeg")

        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=[PROMPT, part],
            config={"response_mime_type": "application/json", "temperature": 0.0},
        )

        text = (response.text or "").strip()
        if not text:
            raise ReceiptParseError("Empty response from model")
        return ReceiptExtractionResult(items=clean_line_items(parse_items_payload(text)))
