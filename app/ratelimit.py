import os

from dotenv import load_dotenv
from slowapi import Limiter
from slowapi.util import get_remote_address

load_dotenv()

CREATE_BILL_RATE_LIMIT = os.getenv("CREATE_BILL_RATE_LIMIT", "30/hour")
SCAN_RATE_LIMIT = os.getenv("SCAN_RATE_LIMIT", "10/minute")

limiter = Limiter(key_func=get_remote_address)
