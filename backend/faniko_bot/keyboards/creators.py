from typing import Any, Dict, List

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from faniko_bot.formatting import money


def explore_keyboard(creators: List[Dict[str, Any]]) -> InlineKeyboardMarkup:
    keyboard = [
        [InlineKeyboardButton(f"{c.get('displayName')} (@{c.get('username')})", callback_data=f"creator:{c.get('username')}")]
        for c in creators
    ]
    return InlineKeyboardMarkup(keyboard)


def subscribe_keyboard(creator: Dict[str, Any]) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        [[
            InlineKeyboardButton(
                f"💳 Subscribe ({money(creator.get('price'))}/mo)",
                callback_data=f"subscribe:{creator.get('username')}",
            )
        ]]
    )


def post_keyboard(post: Dict[str, Any], locked: bool, liked: bool) -> InlineKeyboardMarkup:
    username = post.get("username")
    post_id = post.get("id")

    row = [
        InlineKeyboardButton(
            "💔 Unlike" if liked else "❤️ Like",
            callback_data=f"like:{username}:{post_id}",
        )
    ]
    if locked:
        row.append(
            InlineKeyboardButton(
                f"🔓 Unlock {money(post.get('price'))}",
                callback_data=f"unlock:{username}:{post_id}",
            )
        )
    return InlineKeyboardMarkup([row])
