import os
from dotenv import load_dotenv

load_dotenv()

APP_ENV: str = os.getenv("APP_ENV", "development")
PORT: int = int(os.getenv("PORT", "8000"))
CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# A local seed file wins over the remote URL when both are set
SEED_SOURCE_URL: str = os.getenv(
    "SEED_SOURCE_URL", "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
)
SEED_FILE: str = os.getenv("SEED_FILE", "")
SEED_ON_STARTUP: bool = os.getenv("SEED_ON_STARTUP", "true").strip().lower() in ("1", "true", "yes")
SEED_TIMEOUT_SECONDS: float = float(os.getenv("SEED_TIMEOUT_SECONDS", "30"))


def is_production() -> bool:
    return APP_ENV == "production"


def get_cors_origins() -> list[str]:
    if not CORS_ORIGINS:
        return []
    return [origin.strip() for origin in CORS_ORIGINS.split(",") if origin.strip()]
