import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./storefront.db")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() == "true"
SEED_CATALOG = os.getenv("SEED_CATALOG", "true").lower() == "true"

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# Simulated payment decline applied after the stock check
TRANSACTION_FAILURE_RATE = float(os.getenv("TRANSACTION_FAILURE_RATE", "0.2"))
_failure_seed = os.getenv("TRANSACTION_FAILURE_SEED")
TRANSACTION_FAILURE_SEED = int(_failure_seed) if _failure_seed else None

LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

STOREFRONT_URL = os.getenv("STOREFRONT_URL", f"http://localhost:{API_PORT}")
CLIENT_TIMEOUT = float(os.getenv("CLIENT_TIMEOUT", "10.0"))
