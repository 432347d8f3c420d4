import logging
import os

from app.receipt.base import ReceiptExtractor
from app.receipt.gemini_provider import GeminiReceiptExtractor, get_api_key as get_gemini_api_key
from app.receipt.mock_provider import MockReceiptExtractor
from app.receipt.openai_provider import OpenAIReceiptExtractor

logger = logging.getLogger("moneymate")


def get_receipt_extractor() -> ReceiptExtractor:
    """Return the configured receipt extraction provider.

    Falls back to canned sample items when the provider has no credential.
    """
    provider = os.getenv("RECEIPT_PROVIDER", "openai")
    if provider == "mock":
        return MockReceiptExtractor()
    if provider == "openai":
        if not os.getenv("OPENAI_API_KEY"):
            logger.warning("OPENAI_API_KEY is not set. Returning mock data.")
            return MockReceiptExtractor()
        return OpenAIReceiptExtractor()
    if provider == "gemini":
        if not get_gemini_api_key():
            logger.warning("GEMINI_API_KEY is not set. Returning mock data.")
            return MockReceiptExtractor()
        return GeminiReceiptExtractor()
    raise ValueError(f"Unknown receipt provider: {provider}")
