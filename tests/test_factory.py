import pytest

from app.receipt.factory import get_receipt_extractor
from app.receipt.mock_provider import MockReceiptExtractor
from app.receipt.openai_provider import OpenAIReceiptExtractor


def test_missing_openai_key_falls_back_to_sample_items(monkeypatch):
    monkeypatch.setenv("RECEIPT_PROVIDER", "openai")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    assert isinstance(get_receipt_extractor(), MockReceiptExtractor)


def test_openai_provider_with_key(monkeypatch):
    monkeypatch.setenv("RECEIPT_PROVIDER", "openai")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    assert isinstance(get_receipt_extractor(), OpenAIReceiptExtractor)


def test_missing_gemini_key_falls_back_to_sample_items(monkeypatch):
    monkeypatch.setenv("RECEIPT_PROVIDER", "gemini")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_GEMINI_API_KEY", raising=False)

    assert isinstance(get_receipt_extractor(), MockReceiptExtractor)


def test_unknown_provider(monkeypatch):
    monkeypatch.setenv("RECEIPT_PROVIDER", "abacus")

    with pytest.raises(ValueError):
        get_receipt_extractor()
