from telegram.ext import CallbackQueryHandler, CommandHandler

from faniko_bot.api_client import FanikoClient
from faniko_bot.bot import COMMANDS, build_application
from faniko_bot.formatting import (
    bold,
    creator_card,
    earnings_text,
    is_post_locked,
    liked_by,
    md,
    money,
    post_text,
)
from faniko_bot.handlers.dashboard import parse_apply_args, parse_edit_post_args, parse_post_args

FAN = {"id": 2, "username": "fan1", "email": "fan@example.com", "role": "fan"}
OWNER = {"id": 1, "username": "jane", "email": "jane@example.com", "role": "creator"}

PPV_POST = {
    "id": 7,
    "username": "jane",
    "title": "Behind the scenes",
    "visibility": "ppv",
    "price": 4.99,
    "description": "full shoot",
    "likes": 1,
    "likedBy": ["Fan1"],
}


# -------------------------------------------------
# LOCK RULES
# -------------------------------------------------
def test_free_posts_never_locked():
    post = dict(PPV_POST, visibility="free", price=None)

    assert is_post_locked(post, None, []) is False


def test_ppv_locked_for_fans_until_unlocked():
    assert is_post_locked(PPV_POST, FAN, []) is True
    assert is_post_locked(PPV_POST, None, []) is True
    assert is_post_locked(PPV_POST, FAN, [7]) is False


def test_owner_sees_own_ppv():
    assert is_post_locked(PPV_POST, OWNER, []) is False
    # same username but still a fan account → locked
    assert is_post_locked(PPV_POST, dict(OWNER, role="fan"), []) is True


def test_liked_by_is_case_insensitive():
    assert liked_by(PPV_POST, "fan1") is True
    assert liked_by(PPV_POST, "someone") is False
    assert liked_by(PPV_POST, None) is False


# -------------------------------------------------
# TEXT
# -------------------------------------------------
def test_money_and_markdown_escape():
    assert money(4.99) == "$4.99"
    assert money("12") == "$12.00"
    assert money(None) == "$0.00"
    assert md("fan_one*") == "fan\\_one\\*"


def test_bold_keeps_user_text_unescaped():
    assert bold("jane_doe", "@") == "*@jane_doe*"
    assert bold("a*b") == "*ab*"
    assert "*@jane_doe*" in post_text(dict(PPV_POST, title="@jane_doe"), locked=True)


def test_post_text_hides_locked_content():
    locked = post_text(PPV_POST, locked=True)
    unlocked = post_text(PPV_POST, locked=False, liked=True)

    assert "🔒" in locked
    assert "full shoot" not in locked
    assert "PPV $4.99" in locked
    assert "full shoot" in unlocked
    assert "❤️ 1" in unlocked


def test_creator_card_shows_plan():
    sub = creator_card({"displayName": "Jane", "username": "jane", "accountType": "subscription", "price": 9.99})
    free = creator_card({"displayName": "Mike", "username": "mike", "accountType": "free", "price": None})

    assert "$9.99/month" in sub
    assert "Free to follow" in free


def test_earnings_text():
    text = earnings_text({
        "creator": "jane",
        "totals": {"tips": 5, "ppv": 3, "subscriptions": 10, "allTime": 18},
        "transactions": [{}, {}, {}],
    })

    assert "Lifetime: $18.00" in text
    assert "3 transaction(s)" in text


# -------------------------------------------------
# ARG PARSING
# -------------------------------------------------
def test_parse_apply_args():
    assert parse_apply_args(["Jane", "Doe", "subscription", "9.99"]) == ("Jane Doe", "subscription", 9.99)
    assert parse_apply_args(["Jane", "FREE"]) == ("Jane", "free", None)
    assert parse_apply_args(["subscription"]) is None
    assert parse_apply_args(["Jane", "Doe"]) is None


def test_parse_post_args():
    assert parse_post_args(["ppv", "4.99", "Behind", "the", "scenes"]) == ("ppv", 4.99, "Behind the scenes")
    assert parse_post_args(["free", "Hello", "fans"]) == ("free", None, "Hello fans")
    assert parse_post_args(["ppv", "Hello"]) is None
    assert parse_post_args(["secret", "Hello"]) is None
    assert parse_post_args(["free"]) is None


# -------------------------------------------------
# WIRING
# -------------------------------------------------
def test_build_application_registers_handlers():
    api = FanikoClient("http://faniko.test")

    app = build_application("123456:TEST-TOKEN", api=api)

    handlers = [h for group in app.handlers.values() for h in group]
    commands = set()
    for h in handlers:
        if isinstance(h, CommandHandler):
            commands.update(h.commands)

    assert commands == set(COMMANDS)
    assert any(isinstance(h, CallbackQueryHandler) for h in handlers)
    assert app.bot_data["api"] is api


def test_parse_edit_post_args():
    assert parse_edit_post_args(["3", "ppv", "2.5", "New", "title"]) == (
        3,
        {"visibility": "ppv", "price": 2.5, "title": "New title"},
    )
    assert parse_edit_post_args(["3", "FREE"]) == (3, {"visibility": "free"})
    assert parse_edit_post_args(["3", "1.99"]) == (3, {"price": 1.99})
    assert parse_edit_post_args(["3"]) is None
    assert parse_edit_post_args(["x", "free"]) is None
    assert parse_edit_post_args([]) is None
