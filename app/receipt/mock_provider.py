from app.receipt.base import ReceiptExtractionResult, ReceiptLineItem

SAMPLE_ITEMS = [
    ReceiptLineItem(id="item-1", name="Burger", price=12.99),
    ReceiptLineItem(id="item-2", name="Fries", price=4.99),
    ReceiptLineItem(id="item-3", name="Soda", price=2.49),
    ReceiptLineItem(id="item-4", name="Ice Cream", price=5.99),
]


class MockReceiptExtractor:
    """Returns a fixed item list; used when no provider credential is set."""

    async def extract(self, image_bytes: bytes, content_type: str) -> ReceiptExtractionResult:
        return ReceiptExtractionResult(items=[item.model_copy() for item in SAMPLE_ITEMS])
