import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()


# -------------------------------------------------
# ENV HELPERS
# -------------------------------------------------
def get_list_env(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


# -------------------------------------------------
# SERVER
# -------------------------------------------------
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "4000"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Frontend origins allowed by CORS
CORS_ORIGINS: List[str] = get_list_env("CORS_ORIGINS", "http://localhost:5173")

# -------------------------------------------------
# MEDIA
# -------------------------------------------------
UPLOADS_DIR: Path = Path(os.getenv("FANIKO_UPLOADS_DIR", "uploads")).resolve()

# -------------------------------------------------
# TELEGRAM (OPTIONAL, ENABLES WEBHOOK MODE)
# -------------------------------------------------
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")

# -------------------------------------------------
# MONEY
# -------------------------------------------------
CURRENCY = "USD"
TIP_MESSAGE_MAX_CHARS = 500
