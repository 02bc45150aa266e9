# backend/faniko_bot/handlers/text_router.py

from __future__ import annotations

from telegram import Update
from telegram.ext import ContextTypes

from faniko_bot.handlers.explore import explore_command, show_creator
from faniko_bot.handlers.payments import do_like, do_subscribe, do_unlock
from faniko_bot.handlers.start import help_message


async def text_router(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """
    Non-command text:
        ✓ "explore" / "creators" keywords
        ✓ "@username" opens a profile
        ✓ everything else gets the help text
    """
    message = update.effective_message
    if message is None or not message.text:
        return

    text = message.text.strip()
    text_lower = text.lower()
    chat_id = update.effective_chat.id if update.effective_chat else None

    if text_lower in ("explore", "creators", "browse"):
        await explore_command(update, context)
        return

    if text.startswith("@") and len(text) > 1 and " " not in text:
        await show_creator(context, chat_id, text[1:])
        return

    await help_message(update, context)


# =============================================================
# CALLBACK ROUTER (Inline Keyboard)
#   creator:<username>
#   subscribe:<username>
#   like:<username>:<postId>
#   unlock:<username>:<postId>
# =============================================================
async def callback_router(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    if not query or not query.message or not query.message.chat:
        return

    data = query.data or ""
    await query.answer()

    chat_id = query.message.chat.id
    action, _, rest = data.partition(":")

    if action == "creator" and rest:
        return await show_creator(context, chat_id, rest)

    if action == "subscribe" and rest:
        return await do_subscribe(context, chat_id, rest)

    if action in ("like", "unlock"):
        username, _, raw_id = rest.rpartition(":")
        if username and raw_id.isdigit():
            if action == "like":
                return await do_like(context, chat_id, username, int(raw_id))
            return await do_unlock(context, chat_id, username, int(raw_id))

    await context.bot.send_message(chat_id, "⚠️ Unknown action.")
