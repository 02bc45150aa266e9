# backend/faniko/routes/payment_routes.py
#
# PAYMENTS / TRANSACTIONS (MVP, no real processor)

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body

from faniko.services import creator_service, earnings_service, payment_service

router = APIRouter(prefix="/api/creators/{username}", tags=["payments"])


# -------------------------------------------------
# TIP
# Body: {amount, message?, fanUsername?, fanEmail?, postId?}
# -------------------------------------------------
@router.post("/tips")
def tip(username: str, payload: Optional[Dict[str, Any]] = Body(None)):
    txn = payment_service.tip(username, payload or {})
    return {"success": True, "transaction": txn.to_json()}


# -------------------------------------------------
# PPV UNLOCK
# Body: {fanUsername?, fanEmail?}
# -------------------------------------------------
@router.post("/posts/{post_id}/unlock")
def unlock(username: str, post_id: str, payload: Optional[Dict[str, Any]] = Body(None)):
    unlocked_id, txn = payment_service.unlock(username, post_id, payload or {})

    if txn is None:
        return {"success": True, "alreadyUnlocked": True, "unlockedPostId": unlocked_id}

    return {"success": True, "unlockedPostId": unlocked_id, "transaction": txn.to_json()}


@router.get("/unlocks")
def unlocks(username: str, fanUsername: Optional[str] = None):
    creator = creator_service.get_creator(username)
    return {
        "creator": creator.username,
        "fanUsername": fanUsername,
        "postIds": payment_service.unlocked_post_ids(username, fanUsername),
    }


# -------------------------------------------------
# SUBSCRIBE
# Body: {fanUsername?, fanEmail?}
# -------------------------------------------------
@router.post("/subscribe")
def subscribe(username: str, payload: Optional[Dict[str, Any]] = Body(None)):
    subscription, txn = payment_service.subscribe(username, payload or {})

    if txn is None:
        return {
            "success": True,
            "alreadySubscribed": True,
            "subscription": subscription.to_json(),
        }

    return {
        "success": True,
        "subscription": subscription.to_json(),
        "transaction": txn.to_json(),
    }


@router.get("/subscription")
def subscription_status(username: str, fanUsername: Optional[str] = None):
    subscription = payment_service.subscription_for(username, fanUsername)
    return {
        "subscribed": subscription is not None,
        "subscription": subscription.to_json() if subscription else None,
    }


@router.get("/subscribers")
def subscribers(username: str):
    return [s.to_json() for s in payment_service.subscribers(username)]


# -------------------------------------------------
# EARNINGS SUMMARY
# -------------------------------------------------
@router.get("/earnings")
def earnings(username: str):
    return earnings_service.earnings(username)
