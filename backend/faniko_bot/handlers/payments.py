# backend/faniko_bot/handlers/payments.py

from __future__ import annotations

import logging
from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from faniko_bot.api_client import FanikoApiError
from faniko_bot.formatting import md, money, post_text
from faniko_bot.handlers.session import fan_identity, get_api, send

logger = logging.getLogger("faniko-bot.payments")


def _parse_post_id(value: str) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_amount(value: str) -> Optional[float]:
    try:
        amount = float(value.replace("$", ""))
    except (AttributeError, ValueError):
        return None
    return amount if amount > 0 else None


# =================================================
# TIP
# =================================================
async def tip_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    args = context.args or []

    amount = _parse_amount(args[1]) if len(args) >= 2 else None
    if amount is None:
        await send(context, chat_id, "Usage: `/tip username amount [message]`\nExample: `/tip jane 5 great post!`")
        return

    username = args[0]
    message = " ".join(args[2:]) or None
    fan_username, fan_email = fan_identity(context)

    try:
        data = await get_api(context).tip(
            username,
            amount,
            fan_username=fan_username,
            fan_email=fan_email,
            message=message,
        )
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    txn = data.get("transaction") or {}
    logger.info("💸 Bot tip: creator=%s amount=%s", username, txn.get("amount"))
    await send(context, chat_id, f"💸 Sent a {money(txn.get('amount'))} tip to @{md(username)}. Thank you!")


# =================================================
# SUBSCRIBE
# =================================================
async def subscribe_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    args = context.args or []

    if not args:
        await send(context, chat_id, "Usage: `/subscribe username`")
        return

    await do_subscribe(context, chat_id, args[0])


async def do_subscribe(context: ContextTypes.DEFAULT_TYPE, chat_id: Optional[int], username: str):
    fan_username, fan_email = fan_identity(context)

    try:
        data = await get_api(context).subscribe(username, fan_username=fan_username, fan_email=fan_email)
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    subscription = data.get("subscription") or {}
    if data.get("alreadySubscribed"):
        await send(context, chat_id, f"✅ You're already subscribed to @{md(username)}.")
        return

    await send(
        context,
        chat_id,
        f"🎉 Subscribed to @{md(username)} for {money(subscription.get('price'))}/month.",
    )


# =================================================
# PPV UNLOCK
# =================================================
async def unlock_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    args = context.args or []

    post_id = _parse_post_id(args[1]) if len(args) >= 2 else None
    if post_id is None:
        await send(context, chat_id, "Usage: `/unlock username postId`")
        return

    await do_unlock(context, chat_id, args[0], post_id)


async def do_unlock(context: ContextTypes.DEFAULT_TYPE, chat_id: Optional[int], username: str, post_id: int):
    api = get_api(context)
    fan_username, fan_email = fan_identity(context)

    try:
        data = await api.unlock(username, post_id, fan_username=fan_username, fan_email=fan_email)
        posts = await api.list_posts(username)
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    if data.get("alreadyUnlocked"):
        await send(context, chat_id, "🔓 You already unlocked this post.")
    else:
        txn = data.get("transaction") or {}
        await send(context, chat_id, f"🔓 Unlocked for {money(txn.get('amount'))}.")

    post = next((p for p in posts if p.get("id") == data.get("unlockedPostId")), None)
    if post is not None:
        await send(context, chat_id, post_text(post, locked=False))


# =================================================
# LIKE / UNLIKE
# =================================================
async def like_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    args = context.args or []

    post_id = _parse_post_id(args[1]) if len(args) >= 2 else None
    if post_id is None:
        await send(context, chat_id, "Usage: `/like username postId`")
        return

    await do_like(context, chat_id, args[0], post_id)


async def do_like(context: ContextTypes.DEFAULT_TYPE, chat_id: Optional[int], username: str, post_id: int):
    fan_username, _ = fan_identity(context)
    if not fan_username:
        await send(context, chat_id, "🔐 Log in to like posts: `/login email password`")
        return

    try:
        data = await get_api(context).like(username, post_id, fan_username)
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    verb = "❤️ Liked" if data.get("likedByMe") else "💔 Unliked"
    await send(context, chat_id, f"{verb} post #{post_id} ({data.get('likes', 0)} likes).")
