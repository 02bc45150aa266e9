# backend/faniko_bot/handlers/session.py
#
# Per-chat login state, kept in PTB user_data under "user":
#   {"id", "email", "username", "role"}

from __future__ import annotations

from typing import Any, Dict, Optional, cast

from telegram.ext import ContextTypes

from faniko_bot.api_client import FanikoClient

SESSION_KEY = "user"


def _user_data(context: ContextTypes.DEFAULT_TYPE) -> Dict[str, Any]:
    return cast(Dict[str, Any], context.user_data if context.user_data is not None else {})


def get_user(context: ContextTypes.DEFAULT_TYPE) -> Optional[Dict[str, Any]]:
    return _user_data(context).get(SESSION_KEY)


def set_user(context: ContextTypes.DEFAULT_TYPE, user: Dict[str, Any]) -> None:
    _user_data(context)[SESSION_KEY] = {
        "id": user.get("id"),
        "email": user.get("email"),
        "username": user.get("username"),
        "role": user.get("role", "fan"),
    }


def clear_user(context: ContextTypes.DEFAULT_TYPE) -> None:
    _user_data(context).pop(SESSION_KEY, None)


def upgrade_to_creator(context: ContextTypes.DEFAULT_TYPE) -> None:
    user = get_user(context)
    if user:
        user["role"] = "creator"


def fan_identity(context: ContextTypes.DEFAULT_TYPE) -> tuple[Optional[str], Optional[str]]:
    """(username, email) of the logged-in fan, or (None, None) for guests."""
    user = get_user(context)
    if not user:
        return None, None
    return user.get("username"), user.get("email")


def get_api(context: ContextTypes.DEFAULT_TYPE) -> FanikoClient:
    return context.bot_data["api"]


# -------------------------------------------------
# SAFE SEND (no crash if chat missing)
# -------------------------------------------------
async def send(
    context: ContextTypes.DEFAULT_TYPE,
    chat_id: Optional[int],
    text: str,
    parse_mode: Optional[str] = "Markdown",
    reply_markup=None,
):
    if chat_id is None:
        return

    await context.bot.send_message(
        chat_id,
        text,
        parse_mode=parse_mode,
        reply_markup=reply_markup,
        disable_web_page_preview=True,
    )
