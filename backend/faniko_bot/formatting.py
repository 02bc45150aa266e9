# backend/faniko_bot/formatting.py
#
# Pure text builders for bot replies. No Telegram objects in here.

from typing import Any, Dict, Iterable, Optional

MARKDOWN_SPECIALS = ("\\", "_", "*", "`", "[")


def md(value: Any) -> str:
    """Escape user-supplied text for legacy Markdown replies."""
    text = "" if value is None else str(value)
    for ch in MARKDOWN_SPECIALS:
        text = text.replace(ch, "\\" + ch)
    return text


def bold(value: Any, prefix: str = "") -> str:
    """
    Bold entity for user text. Legacy Markdown takes no escapes inside an
    entity, so the text goes in as-is and only `*` (the closing mark) is dropped.
    """
    text = "" if value is None else str(value)
    return "*" + prefix + text.replace("*", "") + "*"


def money(amount: Any) -> str:
    try:
        return f"${float(amount):,.2f}"
    except (TypeError, ValueError):
        return "$0.00"


def is_owner(viewer: Optional[Dict[str, Any]], creator_username: str) -> bool:
    """Logged-in creator looking at their own profile."""
    return (
        viewer is not None
        and viewer.get("role") == "creator"
        and str(viewer.get("username", "")).lower() == creator_username.lower()
    )


def is_post_locked(
    post: Dict[str, Any],
    viewer: Optional[Dict[str, Any]],
    unlocked_ids: Iterable[int],
) -> bool:
    """
    - free posts → never locked
    - owner → never locked
    - everyone else → PPV locked until unlocked
    """
    if post.get("visibility") != "ppv":
        return False
    if is_owner(viewer, str(post.get("username", ""))):
        return False
    return post.get("id") not in set(unlocked_ids)


def liked_by(post: Dict[str, Any], fan_username: Optional[str]) -> bool:
    if not fan_username:
        return False
    return any(str(name).lower() == fan_username.lower() for name in post.get("likedBy") or [])


def creator_card(creator: Dict[str, Any]) -> str:
    lines = [
        f"🌟 {bold(creator.get('displayName'))} (@{md(creator.get('username'))})",
    ]
    if creator.get("accountType") == "subscription" and creator.get("price"):
        lines.append(f"💳 Subscription: {money(creator['price'])}/month")
    else:
        lines.append("🆓 Free to follow")
    return "\n".join(lines)


def post_text(post: Dict[str, Any], locked: bool, liked: bool = False) -> str:
    heart = "❤️" if liked else "🤍"
    head = f"#{post.get('id')} {bold(post.get('title'))}"

    if post.get("visibility") == "ppv":
        head += f" · PPV {money(post.get('price'))}"

    if locked:
        body = "🔒 Locked, unlock to view."
    else:
        body = md(post.get("description") or "")
        if post.get("mediaFilename"):
            body = (body + "\n" if body else "") + f"📎 /uploads/{md(post['mediaFilename'])}"

    lines = [head]
    if body:
        lines.append(body)
    lines.append(f"{heart} {post.get('likes', 0)}")
    return "\n".join(lines)


def earnings_text(data: Dict[str, Any]) -> str:
    totals = data.get("totals") or {}
    count = len(data.get("transactions") or [])
    return (
        f"📊 {bold(data.get('creator'), 'Earnings for @')}\n\n"
        f"• Subscriptions: {money(totals.get('subscriptions', 0))}\n"
        f"• PPV unlocks: {money(totals.get('ppv', 0))}\n"
        f"• Tips: {money(totals.get('tips', 0))}\n\n"
        f"💰 *Lifetime: {money(totals.get('allTime', 0))}*\n"
        f"🧾 {count} transaction(s)"
    )


def account_text(user: Optional[Dict[str, Any]]) -> str:
    if not user:
        return (
            "👤 You're browsing as a guest.\n\n"
            "Use `/signup email username password` or `/login email password`."
        )
    role = "Creator" if user.get("role") == "creator" else "Fan"
    return (
        f"👤 {bold(user.get('username'), '@')}\n"
        f"✉️ {md(user.get('email'))}\n"
        f"🏷 {role}"
    )
