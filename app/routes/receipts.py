import logging

from fastapi import APIRouter, Depends, HTTPException, Request, UploadFile, File

from app.deps import get_bill_by_token
from app.ratelimit import SCAN_RATE_LIMIT, limiter
from app.receipt.factory import get_receipt_extractor
from app.receipt.parsing import decode_data_url
from app.schemas import AnalyzeReceiptIn
from app.serializers import serialize_line_item
from app.store import BillStore, get_store

logger = logging.getLogger("moneymate")
router = APIRouter()

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MB
ALLOWED_CONTENT_TYPES = {"image/jpeg", "image/png", "image/webp", "image/heic", "image/heif"}


def _validate_image(image_bytes: bytes, content_type: str | None) -> None:
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise HTTPException(status_code=400, detail="Unsupported image format. Use JPEG, PNG, or WebP.")
    if len(image_bytes) == 0:
        raise HTTPException(status_code=400, detail="Empty file")
    if len(image_bytes) > MAX_FILE_SIZE:
        raise HTTPException(status_code=400, detail="Image too large. Maximum size is 10 MB.")


async def _extract_items(image_bytes: bytes, content_type: str) -> list[dict]:
    try:
        extractor = get_receipt_extractor()
        result = await extractor.extract(image_bytes, content_type)
    except ValueError as e:
        logger.error(f"Receipt extraction config error: {e}")
        raise HTTPException(status_code=503, detail="Receipt scanning is not available")
    except Exception as e:
        logger.error(f"Receipt extraction failed: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail="Failed to process receipt. Please try again.")

    logger.info("Receipt scanned", extra={"extra_data": {"items_count": len(result.items)}})
    return [serialize_line_item(item) for item in result.items]


@router.post("/bills/{access_token}/scan-receipt")
@limiter.limit(SCAN_RATE_LIMIT)
async def scan_receipt(
    access_token: str,
    request: Request,
    file: UploadFile = File(...),
    store: BillStore = Depends(get_store),
):
    get_bill_by_token(access_token, store)

    image_bytes = await file.read()
    _validate_image(image_bytes, file.content_type)

    return {"items": await _extract_items(image_bytes, file.content_type)}


@router.post("/analyze-receipt")
@limiter.limit(SCAN_RATE_LIMIT)
async def analyze_receipt(request: Request, data: AnalyzeReceiptIn):
    if not data.image:
        raise HTTPException(status_code=400, detail="No image provided")

    try:
        image_bytes, content_type = decode_data_url(data.image)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    _validate_image(image_bytes, content_type)

    return {"items": await _extract_items(image_bytes, content_type)}
