import base64
import os

from agents import Agent, Runner

from app.receipt.base import ReceiptExtractionResult
from app.receipt.parsing import clean_line_items

INSTRUCTIONS = """\
You are a receipt parser. Given a receipt image, extract every purchased item and its price.

Rules:
- items: only actual products/items with their prices
- name: the item name exactly as it appears on the receipt
- price: the line price as a number, currency symbols removed. If an item has a quantity, multiply the price by the quantity
- quantity is optional (null if not visible)
- id is optional (null)
- Do NOT include TOTAL, SUBTOTAL, CASH, PAYMENT, CHANGE, TAX or TIP entries"""

agent = Agent(
    name="Receipt Scanner",
    instructions=INSTRUCTIONS,
    model=os.getenv("RECEIPT_MODEL", "gpt-4o"),
    output_type=ReceiptExtractionResult,
)


class OpenAIReceiptExtractor:
    """Receipt extraction using OpenAI Agents SDK with GPT-4o vision."""

    async def extract(self, image_bytes: bytes, content_type: str) -> ReceiptExtractionResult:
        b64_image = base64.b64encode(image_bytes).decode("utf-8")
        media_type = content_type or "image/jpeg"

        result = await Runner.run(
            agent,
            input=[
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": "Extract the line items from this receipt."},
                        {"type": "input_image", "image_url": f"data:{media_type};base64,{b64_image}"},
                    ],
                }
            ],
        )

        return ReceiptExtractionResult(items=clean_line_items(result.final_output.items))
