import logging
from typing import Tuple

from fastapi import APIRouter, Request
from telegram import Update
from telegram.ext import Application

from faniko_bot.bot import build_application

# -------------------------------------------------
# LOGGING
# -------------------------------------------------
logger = logging.getLogger("faniko-backend.telegram")


def build_webhook_router(token: str) -> Tuple[APIRouter, Application]:
    """
    Mounts the fan bot inside the API process.
    Telegram posts updates to /telegram/webhook; PTB routes them
    to the same handlers the polling bot uses.
    """
    telegram_app = build_application(token)
    router = APIRouter(prefix="/telegram", tags=["telegram"])

    @router.post("/webhook")
    async def telegram_webhook(request: Request):
        payload = await request.json()

        try:
            update = Update.de_json(payload, telegram_app.bot)
            await telegram_app.process_update(update)
        except Exception as e:
            logger.error("❌ Error processing Telegram update: %s", e)

        return {"ok": True}

    return router, telegram_app
