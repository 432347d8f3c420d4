from typing import Protocol

from pydantic import BaseModel


class ReceiptLineItem(BaseModel):
    id: str | None = None
    name: str
    price: float  # display units (e.g. 12.50 for $12.50)
    quantity: int | None = None


class ReceiptExtractionResult(BaseModel):
    items: list[ReceiptLineItem]


class ReceiptParseError(Exception):
    """The provider answered, but not with a usable item list."""


class ReceiptExtractor(Protocol):
    async def extract(self, image_bytes: bytes, content_type: str) -> ReceiptExtractionResult: ...
