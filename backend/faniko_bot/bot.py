# backend/faniko_bot/bot.py

import logging
from typing import Optional

from telegram import Update
from telegram.ext import (
    Application,
    ApplicationBuilder,
    CallbackQueryHandler,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from faniko_bot.api_client import FanikoClient
from faniko_bot.config import get_api_url, get_required_env

# ---------- HANDLERS ----------
from faniko_bot.handlers.start import start_message, help_message
from faniko_bot.handlers.auth import signup_command, login_command, logout_command, me_command
from faniko_bot.handlers.explore import explore_command, creator_command
from faniko_bot.handlers.payments import tip_command, subscribe_command, unlock_command, like_command
from faniko_bot.handlers.dashboard import (
    apply_command,
    price_command,
    post_command,
    delete_post_command,
    edit_post_command,
    earnings_command,
    subscribers_command,
)
from faniko_bot.handlers.text_router import text_router, callback_router

logger = logging.getLogger("faniko-bot")

COMMANDS = {
    "start": start_message,
    "help": help_message,
    "signup": signup_command,
    "login": login_command,
    "logout": logout_command,
    "me": me_command,
    "explore": explore_command,
    "creator": creator_command,
    "tip": tip_command,
    "subscribe": subscribe_command,
    "unlock": unlock_command,
    "like": like_command,
    "apply": apply_command,
    "price": price_command,
    "post": post_command,
    "deletepost": delete_post_command,
    "editpost": edit_post_command,
    "earnings": earnings_command,
    "subscribers": subscribers_command,
}


# ---------- ERROR HANDLER ----------
async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    logger.error("Unhandled error", exc_info=context.error)
    if isinstance(update, Update) and update.effective_message:
        await update.effective_message.reply_text("❌ Something went wrong. Please try again.")


def build_application(token: str, api: Optional[FanikoClient] = None) -> Application:
    """
    Wires every handler onto a PTB Application.
    Shared by polling mode (main) and the backend's webhook route.
    """
    app = ApplicationBuilder().token(token).build()
    app.bot_data["api"] = api or FanikoClient(get_api_url())

    for name, handler in COMMANDS.items():
        app.add_handler(CommandHandler(name, handler))

    app.add_handler(CallbackQueryHandler(callback_router))

    # ONE text handler ONLY
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, text_router))

    app.add_error_handler(error_handler)
    return app


# ---------- MAIN (faniko-bot, polling mode) ----------
def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    token = get_required_env("TELEGRAM_BOT_TOKEN")
    logger.info("🤖 Faniko bot starting (polling) → API %s", get_api_url())

    app = build_application(token)
    app.run_polling()


if __name__ == "__main__":
    main()
