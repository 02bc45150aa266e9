import os

from dotenv import load_dotenv

load_dotenv()


# -------------------------------------------------
# ENV HELPERS
# -------------------------------------------------
def get_required_env(name: str) -> str:
    value = os.getenv(name)
    if not value or not value.strip():
        raise RuntimeError(f"❌ Missing required env var: {name}")
    return value


# -------------------------------------------------
# BOT CONFIG
# -------------------------------------------------
BOT_NAME: str = os.getenv("BOT_NAME", "Faniko")

# Backend the bot talks to (same REST API the web frontend uses)
PUBLIC_API_URL = "http://localhost:4000"


def get_api_url() -> str:
    """
    1) FANIKO_API_URL if provided
    2) else the local backend
    """
    value = os.getenv("FANIKO_API_URL")
    if value and value.strip():
        return value.strip().rstrip("/")
    return PUBLIC_API_URL
