# backend/faniko_bot/handlers/auth.py

import logging

from telegram import Update
from telegram.ext import ContextTypes

from faniko_bot.api_client import FanikoApiError
from faniko_bot.formatting import account_text, bold, md
from faniko_bot.handlers.session import clear_user, get_api, get_user, send, set_user

logger = logging.getLogger("faniko-bot.auth")


async def signup_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    args = context.args or []

    if len(args) != 3:
        await send(context, chat_id, "Usage: `/signup email username password`")
        return

    email, username, password = args
    try:
        user = await get_api(context).signup(email, username, password)
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    set_user(context, user)
    logger.info("🆕 Bot signup: %s", user.get("username"))
    await send(context, chat_id, f"🎉 Welcome, {bold(user.get('username'), '@')}! You're logged in.")


async def login_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    args = context.args or []

    if len(args) != 2:
        await send(context, chat_id, "Usage: `/login email password`")
        return

    try:
        user = await get_api(context).login(args[0], args[1])
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    set_user(context, user)
    await send(context, chat_id, f"✅ Logged in as {bold(user.get('username'), '@')}.")


async def logout_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    clear_user(context)
    await send(context, chat_id, "👋 Logged out.")


async def me_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    await send(context, chat_id, account_text(get_user(context)))
