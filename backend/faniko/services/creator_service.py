# backend/faniko/services/creator_service.py

import logging
from typing import Any, Dict, List, Optional

from fastapi import UploadFile

from faniko.db import get_db
from faniko.exceptions import BadRequestError, ConflictError, CreatorNotFound
from faniko.models.creator import ACCOUNT_TYPES, Creator
from faniko.services.media_service import save_upload
from faniko.utils.helpers import clean, clean_lower, now_iso, same_name, to_number

logger = logging.getLogger("faniko-backend.creators")


# -------------------------------------------------
# LOOKUPS
# -------------------------------------------------
def find_creator(username: str) -> Optional[Creator]:
    db = get_db()
    return next((c for c in db.creators if same_name(c.username, username)), None)


def get_creator(username: str) -> Creator:
    creator = find_creator(username)
    if creator is None:
        raise CreatorNotFound()
    return creator


def list_creators() -> List[Creator]:
    return list(get_db().creators)


# -------------------------------------------------
# APPLY (KYC form)
# -------------------------------------------------
def apply(
    fields: Dict[str, Any],
    id_front: Optional[UploadFile] = None,
    id_back: Optional[UploadFile] = None,
    selfie: Optional[UploadFile] = None,
) -> Creator:
    display_name = clean(fields.get("displayName"))
    username = clean_lower(fields.get("username"))
    email = clean_lower(fields.get("email"))
    account_type = clean(fields.get("accountType"))
    price = fields.get("price")

    logger.info(
        "🔔 New creator application: username=%s email=%s accountType=%s price=%s",
        username, email, account_type, price,
    )

    if not display_name or not username or not email or not account_type:
        raise BadRequestError("Missing required fields")

    if account_type not in ACCOUNT_TYPES:
        raise BadRequestError("Invalid account type")

    db = get_db()
    with db.lock:
        if any(same_name(c.username, username) for c in db.creators):
            raise ConflictError("That creator username is already taken.")

        if any(same_name(c.email, email) for c in db.creators):
            raise ConflictError(
                "This email is already linked to a creator account. Try logging in instead."
            )

        record = Creator(
            id=db.next_id("creators"),
            display_name=display_name,
            username=username,
            email=email,
            account_type=account_type,
            price=(to_number(price) or None) if account_type == "subscription" else None,
            id_front_path=save_upload("idFront", id_front),
            id_back_path=save_upload("idBack", id_back),
            selfie_path=save_upload("selfie", selfie),
            created_at=now_iso(),
            status="pending",
        )
        db.creators.append(record)
        logger.info("✅ Saved creator: id=%s username=%s", record.id, record.username)

        # Upgrade matching fan account (if any) to creator role
        existing = next((u for u in db.users if u.email == email), None)
        if existing is not None:
            existing.role = "creator"
            logger.info(
                "🔼 Upgraded user to creator: id=%s username=%s",
                existing.id, existing.username,
            )

    return record


# -------------------------------------------------
# UPDATE PROFILE (displayName, accountType, price)
# -------------------------------------------------
def update(username: str, payload: Dict[str, Any]) -> Creator:
    db = get_db()
    with db.lock:
        creator = get_creator(username)

        display_name = payload.get("displayName")
        account_type = payload.get("accountType")
        price = payload.get("price")

        if display_name is not None:
            name = clean(display_name)
            if name:
                creator.display_name = name

        if account_type is not None:
            if account_type not in ACCOUNT_TYPES:
                raise BadRequestError("Invalid account type")
            creator.account_type = account_type

            if account_type == "subscription":
                creator.price = to_number(price) or creator.price or 0
            else:
                creator.price = None

        elif price is not None and creator.account_type == "subscription":
            creator.price = to_number(price) or 0

    logger.info(
        "✏️ Updated creator profile: username=%s accountType=%s price=%s",
        creator.username, creator.account_type, creator.price,
    )
    return creator
