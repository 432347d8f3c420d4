import os

import sentry_sdk
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.bills import BillError
from app.logging_config import setup_logging
from app.middleware import CTKMiddleware, RequestLoggingMiddleware
from app.ratelimit import limiter
from app.routes import bills, participants, items, summary, receipts

load_dotenv()

# Sentry
sentry_dsn = os.getenv("SENTRY_DSN")
if sentry_dsn:
    # Disable the auto-detected OpenAI Agents integration due to
    # version incompatibility (sentry-sdk expects a different internal API)
    _disabled = []
    try:
        from sentry_sdk.integrations.openai_agents import OpenAIAgentsIntegration
        _disabled.append(OpenAIAgentsIntegration)
    except ImportError:
        pass
    sentry_sdk.init(
        dsn=sentry_dsn,
        traces_sample_rate=0.1,
        send_default_pii=False,
        disabled_integrations=_disabled,
    )

logger = setup_logging()
logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())


async def bill_error_handler(request: Request, exc: BillError) -> JSONResponse:
    logger.warning(
        f"Bill request rejected: {exc}",
        extra={"extra_data": {"path": request.url.path, "status": exc.status_code}},
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


app = FastAPI(title="Money Mate API", version="0.1.0")
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_exception_handler(BillError, bill_error_handler)

# CORS
origins = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in origins],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type"],
)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CTKMiddleware)

# Routes
app.include_router(bills.router, prefix="/api")
app.include_router(participants.router, prefix="/api")
app.include_router(items.router, prefix="/api")
app.include_router(summary.router, prefix="/api")
app.include_router(receipts.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok"}


def run():
    """Serve the API with uvicorn (the `moneymate-server` console script)."""
    uvicorn.run(
        "app.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        proxy_headers=True,
    )
