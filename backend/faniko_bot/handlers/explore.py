# backend/faniko_bot/handlers/explore.py

from __future__ import annotations

import logging
from typing import Optional

from telegram import Update
from telegram.ext import ContextTypes

from faniko_bot.api_client import FanikoApiError
from faniko_bot.formatting import creator_card, is_owner, is_post_locked, liked_by, md, post_text
from faniko_bot.handlers.session import get_api, get_user, send
from faniko_bot.keyboards.creators import explore_keyboard, post_keyboard, subscribe_keyboard

logger = logging.getLogger("faniko-bot.explore")

MAX_POSTS_SHOWN = 20


async def explore_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None

    try:
        creators = await get_api(context).list_creators()
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    if not creators:
        await send(context, chat_id, "🌱 No creators yet. Be the first: `/apply`")
        return

    await send(
        context,
        chat_id,
        f"🔎 *Explore creators* ({len(creators)})\nTap one to open their profile:",
        reply_markup=explore_keyboard(creators),
    )


async def creator_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    chat_id = update.effective_chat.id if update.effective_chat else None
    args = context.args or []

    if not args:
        await send(context, chat_id, "Usage: `/creator username`")
        return

    await show_creator(context, chat_id, args[0])


async def show_creator(context: ContextTypes.DEFAULT_TYPE, chat_id: Optional[int], username: str):
    """
    Profile card + newest posts with like/unlock buttons.
    Lock state follows the web profile: owners see everything,
    fans see PPV posts locked until they've unlocked them.
    """
    api = get_api(context)
    viewer = get_user(context)
    fan_username = viewer.get("username") if viewer else None

    try:
        creator = await api.get_creator(username)
        posts = await api.list_posts(username)

        unlocked_ids = []
        subscribed = False
        if fan_username and not is_owner(viewer, creator["username"]):
            unlocked_ids = await api.unlocked_post_ids(username, fan_username)
            status = await api.subscription_status(username, fan_username)
            subscribed = bool(status.get("subscribed"))
    except FanikoApiError as e:
        await send(context, chat_id, f"❌ {md(e.message)}")
        return

    card = creator_card(creator)
    markup = None
    if subscribed:
        card += "\n✅ You're subscribed"
    elif (
        creator.get("accountType") == "subscription"
        and creator.get("price")
        and not is_owner(viewer, creator["username"])
    ):
        markup = subscribe_keyboard(creator)

    await send(context, chat_id, card, reply_markup=markup)

    if not posts:
        await send(context, chat_id, "📭 No posts yet.")
        return

    for post in list(reversed(posts))[:MAX_POSTS_SHOWN]:
        locked = is_post_locked(post, viewer, unlocked_ids)
        liked = liked_by(post, fan_username)
        await send(
            context,
            chat_id,
            post_text(post, locked, liked),
            reply_markup=post_keyboard(post, locked, liked),
        )
