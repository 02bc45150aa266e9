# backend/faniko/services/payment_service.py
#
# MVP money flow: no real processor, every "payment" is a Transaction row.

import logging
from typing import Any, Dict, List, Optional, Tuple

from faniko import config
from faniko.db import Store, get_db
from faniko.exceptions import BadRequestError
from faniko.models.creator import Creator
from faniko.models.payments import Subscription, Transaction, UnlockedPost
from faniko.services.creator_service import get_creator
from faniko.services.post_service import get_post
from faniko.utils.helpers import as_text, clean, now_iso, same_name, to_number

logger = logging.getLogger("faniko-backend.payments")

ANONYMOUS = "anonymous"


def _fan_identity(payload: Dict[str, Any]) -> Tuple[str, Optional[str]]:
    """(fanUsername or 'anonymous', fanEmail or None)"""
    fan_username = clean(payload.get("fanUsername"))
    fan_email = clean(payload.get("fanEmail"))
    return fan_username or ANONYMOUS, fan_email or None


def _is_named(fan_username: str) -> bool:
    return bool(fan_username) and fan_username != ANONYMOUS


def _record_transaction(db: Store, creator: Creator, **fields) -> Transaction:
    txn = Transaction(
        id=db.next_id("transactions"),
        creator_username=creator.username,
        currency=config.CURRENCY,
        created_at=now_iso(),
        **fields,
    )
    db.transactions.append(txn)
    return txn


# -------------------------------------------------
# TIPS
# -------------------------------------------------
def tip(username: str, payload: Dict[str, Any]) -> Transaction:
    db = get_db()
    with db.lock:
        creator = get_creator(username)

        amount = to_number(payload.get("amount"))
        if amount is None or amount <= 0:
            raise BadRequestError("Please provide a valid tip amount.")

        fan_username, fan_email = _fan_identity(payload)
        message = as_text(payload.get("message"))[: config.TIP_MESSAGE_MAX_CHARS]

        txn = _record_transaction(
            db,
            creator,
            type="tip",
            fan_username=fan_username,
            fan_email=fan_email,
            amount=amount,
            message=message,
            post_id=to_number(payload.get("postId")) or None,
        )

    logger.info("💸 New tip: id=%s creator=%s fan=%s amount=%s", txn.id, creator.username, fan_username, amount)
    return txn


# -------------------------------------------------
# PPV UNLOCK
# -------------------------------------------------
def find_unlock(db: Store, creator_username: str, fan_username: str, post_id: int) -> Optional[UnlockedPost]:
    if not _is_named(fan_username):
        # anonymous purchases cannot be told apart, each one is a new unlock
        return None
    return next(
        (
            u for u in db.unlocked_posts
            if u.post_id == post_id
            and same_name(u.creator_username, creator_username)
            and same_name(u.fan_username, fan_username)
        ),
        None,
    )


def unlock(username: str, post_id: Any, payload: Dict[str, Any]) -> Tuple[int, Optional[Transaction]]:
    """
    Returns (post id, transaction). Transaction is None when this fan
    had already unlocked the post, in which case nothing is charged.
    """
    db = get_db()
    with db.lock:
        creator = get_creator(username)
        post = get_post(creator.username, post_id)

        if not post.is_paid:
            raise BadRequestError("This post is not a paid PPV post.")

        fan_username, fan_email = _fan_identity(payload)

        if find_unlock(db, creator.username, fan_username, post.id) is not None:
            logger.info("🔁 Already unlocked: post=%s fan=%s", post.id, fan_username)
            return post.id, None

        txn = _record_transaction(
            db,
            creator,
            type="ppv_unlock",
            fan_username=fan_username,
            fan_email=fan_email,
            amount=post.price,
            post_id=post.id,
        )
        db.unlocked_posts.append(
            UnlockedPost(
                creator_username=creator.username,
                fan_username=fan_username,
                post_id=post.id,
                created_at=now_iso(),
            )
        )

    logger.info("🔓 PPV unlocked: txn=%s post=%s fan=%s amount=%s", txn.id, post.id, fan_username, txn.amount)
    return post.id, txn


def unlocked_post_ids(username: str, fan_username: Any) -> List[int]:
    creator = get_creator(username)
    fan_username = clean(fan_username)
    if not _is_named(fan_username):
        return []

    db = get_db()
    return [
        u.post_id for u in db.unlocked_posts
        if same_name(u.creator_username, creator.username)
        and same_name(u.fan_username, fan_username)
    ]


# -------------------------------------------------
# SUBSCRIPTIONS
# -------------------------------------------------
def find_subscription(db: Store, creator_username: str, fan_username: str) -> Optional[Subscription]:
    if not _is_named(fan_username):
        return None
    return next(
        (
            s for s in db.subscriptions
            if same_name(s.creator_username, creator_username)
            and same_name(s.fan_username, fan_username)
        ),
        None,
    )


def subscribe(username: str, payload: Dict[str, Any]) -> Tuple[Subscription, Optional[Transaction]]:
    """
    Returns (subscription, transaction). Transaction is None when the fan
    was already subscribed; the existing subscription is returned as-is.
    """
    db = get_db()
    with db.lock:
        creator = get_creator(username)

        if creator.account_type != "subscription":
            raise BadRequestError("This creator does not have a subscription plan.")

        if not creator.has_subscription_plan:
            raise BadRequestError("This creator's subscription price is not configured.")

        fan_username, fan_email = _fan_identity(payload)

        existing = find_subscription(db, creator.username, fan_username)
        if existing is not None:
            logger.info("🔁 Already subscribed: creator=%s fan=%s", creator.username, fan_username)
            return existing, None

        subscription = Subscription(
            id=db.next_id("subscriptions"),
            creator_username=creator.username,
            fan_username=fan_username,
            fan_email=fan_email,
            price=creator.price,
            currency=config.CURRENCY,
            status="active",
            created_at=now_iso(),
        )
        db.subscriptions.append(subscription)

        txn = _record_transaction(
            db,
            creator,
            type="subscription",
            fan_username=fan_username,
            fan_email=fan_email,
            amount=creator.price,
            post_id=None,
        )

    logger.info(
        "🧾 New subscription + txn: sub=%s txn=%s creator=%s fan=%s price=%s",
        subscription.id, txn.id, creator.username, fan_username, subscription.price,
    )
    return subscription, txn


def subscription_for(username: str, fan_username: Any) -> Optional[Subscription]:
    creator = get_creator(username)
    return find_subscription(get_db(), creator.username, clean(fan_username))


def subscribers(username: str) -> List[Subscription]:
    creator = get_creator(username)
    db = get_db()
    return [s for s in db.subscriptions if same_name(s.creator_username, creator.username)]
