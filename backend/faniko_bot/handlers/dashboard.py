# backend/faniko_bot/handlers/dashboard.py
#
# Creator-side commands: apply, plan pricing, publishing, earnings.

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from telegram import Update
from telegram.ext import ContextTypes

from faniko_bot.api_client import FanikoApiError
from faniko_bot.formatting import bold, earnings_text, md, money
from faniko_bot.handlers.session import get_api, get_user, send, upgrade_to_creator

logger = logging.getLogger("faniko-bot.dashboard")

ACCOUNT_TYPES = ("free", "subscription")
VISIBILITIES = ("free", "ppv")


def _number(value: str) -> Optional[float]:
    try:
        return float(value.replace("$", ""))
    except (AttributeError, ValueError):
        return None


def parse_apply_args(args: List[str]) -> Optional[Tuple[str, str, Optional[float]]]:
    """
    `Jane Doe subscription 9.99` -> ("Jane Doe", "subscription", 9.99)
    `Jane free`                  -> ("Jane", "free", None)
    """
    for i in range(len(args) - 1, 0, -1):
        if args[i].lower() in ACCOUNT_TYPES:
            display_name = " ".join(args[:i]).strip()
            rest = args[i + 1:]
            price = _number(rest[0]) if rest else None
            return display_name, args[i].lower(), price
    return None


def parse_post_args(args: List[str]) -> Optional[Tuple[str, Optional[float], str]]:
    """
    `ppv 4.99 Behind the scenes` -> ("ppv", 4.99, "Behind the scenes")
    `free Hello fans`            -> ("free", None, "Hello fans")
    """
    if len(args) < 2 or args[0].lower() not in VISIBILITIES:
        return None

    visibility = args[0].lower()
    rest = args[1:]
    price = None
    if visibility == "ppv":
        price = _number(rest[0])
        if price is None:
            return None
        rest = rest[1:]

    title = " ".join(rest).strip()
    if not title:
        return None
    return visibility, price, title


def parse_edit_post_args(args: List[str]) -> Optional[Tuple[int, Dict[str, Any]]]:
    """
    `3 ppv 2.5 New title` -> (3, {"visibility": "ppv", "price": 2.5, "title": "New title"})
    `3 free`              -> (3, {"visibility": "free"})
    `3 1.99`              -> (3, {"price": 1.99})
    """
    if not args or not args[0].isdigit():
        return None

    post_id = int(args[0])
    rest = args[1:]
    changes: Dict[str, Any] = {}

    if rest and rest[0].lower() in VISIBILITIES:
        changes["visibility"] = rest[0].lower()
        rest = rest[1:]
    if rest and _number(rest[0]) is not None:
        changes["price"] = _number(rest[0])
        rest = rest[1:]

    title = " ".join(rest).strip()
    if title:
        changes["title"] = title

    if not changes:
        return None
    return post_id, changes


async def _require_login(context: ContextTypes.DEFAULT_TYPE, chat_id: Optional[int]) -> Optional[Dict[str, Any]]:
    user = get_user(context)
    if not user:
        await send(context, chat_id, "🔐 Log in first: `/login email password`")
        return None
    return user


async def _require_creator(context: ContextTypes.DEFAULT_TYPE, chat_id: Optional[int]) -> Optional[Dict[str, Any]]:
    user = await _require_login(context, chat_id)
    if user is None:
        return None
    if user.get("role") != "creator":
        await send(context, chat_id, "🎬 This is for creators. Apply with `/apply Display Name free|subscription [price]`")
        return None
    return user


# =================================================
# APPLY AS CREATOR
# =================================================
async def apply_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    user = await _require_login(context, chat_id)
    if user is None:
        return

    parsed = parse_apply_args(context.args or [])
    if parsed is None or not parsed[0]:
        await send(context, chat_id, "Usage: `/apply Display Name free|subscription [price]`")
        return

    display_name, account_type, price = parsed

    try:
        await get_api(context).apply_creator(
            display_name=display_name,
            username=user["username"],
            email=user["email"],
            account_type=account_type,
            price=price,
        )
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    upgrade_to_creator(context)
    logger.info("🔔 Bot creator application: %s", user["username"])
    await send(
        context,
        chat_id,
        "✅ *Application received!*\n\n"
        "Your creator profile is live with status `pending` while we review your KYC.\n"
        "Publish with `/post` and check money with `/earnings`.",
    )


# =================================================
# PLAN PRICING
# =================================================
async def price_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    user = await _require_creator(context, chat_id)
    if user is None:
        return

    args = context.args or []
    changes: Dict[str, Any] = {}

    if args and args[0].lower() in ACCOUNT_TYPES:
        changes["accountType"] = args[0].lower()
        args = args[1:]
    if args:
        price = _number(args[0])
        if price is None:
            await send(context, chat_id, "Usage: `/price free|subscription [price]`")
            return
        changes["price"] = price

    if not changes:
        await send(context, chat_id, "Usage: `/price free|subscription [price]`")
        return

    try:
        data = await get_api(context).update_creator(user["username"], **changes)
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    creator = data.get("creator") or {}
    if creator.get("accountType") == "subscription":
        await send(context, chat_id, f"💳 Subscription plan: {money(creator.get('price'))}/month.")
    else:
        await send(context, chat_id, "🆓 Your profile is now free to follow.")


# =================================================
# PUBLISH / DELETE
# =================================================
async def post_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    user = await _require_creator(context, chat_id)
    if user is None:
        return

    parsed = parse_post_args(context.args or [])
    if parsed is None:
        await send(context, chat_id, "Usage: `/post free|ppv [price] title`")
        return

    visibility, price, title = parsed

    try:
        data = await get_api(context).create_post(user["username"], title, visibility, price=price)
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    post = data.get("post") or {}
    suffix = f" · PPV {money(post.get('price'))}" if post.get("visibility") == "ppv" else ""
    await send(context, chat_id, f"🆕 Published #{post.get('id')} {bold(post.get('title'))}{suffix}")


async def delete_post_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    user = await _require_creator(context, chat_id)
    if user is None:
        return

    args = context.args or []
    try:
        post_id = int(args[0])
    except (IndexError, ValueError):
        await send(context, chat_id, "Usage: `/deletepost postId`")
        return

    try:
        await get_api(context).delete_post(user["username"], post_id)
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    await send(context, chat_id, f"🗑️ Deleted post #{post_id}. Earnings from it are kept.")


async def edit_post_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    user = await _require_creator(context, chat_id)
    if user is None:
        return

    parsed = parse_edit_post_args(context.args or [])
    if parsed is None:
        await send(context, chat_id, "Usage: `/editpost postId [free|ppv] [price] [title]`")
        return

    post_id, changes = parsed

    try:
        data = await get_api(context).update_post(user["username"], post_id, **changes)
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    post = data.get("post") or {}
    suffix = f" · PPV {money(post.get('price'))}" if post.get("visibility") == "ppv" else " · free"
    await send(context, chat_id, f"✏️ Updated #{post.get('id')} {bold(post.get('title'))}{suffix}")


# =================================================
# EARNINGS + SUBSCRIBERS (owner only)
# =================================================
async def earnings_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    user = await _require_creator(context, chat_id)
    if user is None:
        return

    try:
        data = await get_api(context).earnings(user["username"])
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    await send(context, chat_id, earnings_text(data))


async def subscribers_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    user = await _require_creator(context, chat_id)
    if user is None:
        return

    try:
        subs = await get_api(context).subscribers(user["username"])
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    if not subs:
        await send(context, chat_id, "👥 No subscribers yet.")
        return

    lines = [f"👥 *Subscribers ({len(subs)})*", ""]
    for sub in subs:
        lines.append(f"• @{md(sub.get('fanUsername'))} · {money(sub.get('price'))}/month")
    await send(context, chat_id, "\n".join(lines))
