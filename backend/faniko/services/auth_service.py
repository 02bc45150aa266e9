# backend/faniko/services/auth_service.py

import re
import logging
from typing import Any, Dict, Optional

from faniko.db import get_db
from faniko.exceptions import BadRequestError, ConflictError, UnauthorizedError
from faniko.models.user import User
from faniko.utils.helpers import clean, clean_lower, now_iso

logger = logging.getLogger("faniko-backend.auth")

EMAIL_RE = re.compile(r".+@.+\..+")
USERNAME_RE = re.compile(r"[a-z0-9_]+")
MIN_PASSWORD_LENGTH = 6


def find_user_by_email(email: str) -> Optional[User]:
    db = get_db()
    return next((u for u in db.users if u.email == email), None)


# -------------------------------------------------
# SIGNUP (fans)
# -------------------------------------------------
def signup(payload: Dict[str, Any]) -> User:
    email = clean_lower(payload.get("email"))
    username = clean_lower(payload.get("username"))
    password = clean(payload.get("password"))

    logger.info("🆕 Signup attempt: email=%s username=%s", email, username)

    if not email or not username or not password:
        raise BadRequestError("Missing email, username, or password.")

    if not EMAIL_RE.search(email):
        raise BadRequestError("Please provide a valid email address.")

    if not USERNAME_RE.fullmatch(username):
        raise BadRequestError(
            "Username can only contain lowercase letters, numbers, and underscores."
        )

    if len(password) < MIN_PASSWORD_LENGTH:
        raise BadRequestError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
        )

    db = get_db()
    with db.lock:
        if any(u.email == email for u in db.users):
            raise ConflictError("That email is already in use. Try logging in instead.")

        if any(u.username == username for u in db.users):
            raise ConflictError("That username is already taken. Please choose another.")

        user = User(
            id=db.next_id("users"),
            email=email,
            username=username,
            password=password,
            role="fan",
            email_verified=False,
            created_at=now_iso(),
        )
        db.users.append(user)

    logger.info("✅ Created user: id=%s email=%s username=%s", user.id, user.email, user.username)
    return user


# -------------------------------------------------
# LOGIN (plaintext check, MVP)
# -------------------------------------------------
def login(payload: Dict[str, Any]) -> User:
    email = clean_lower(payload.get("email"))
    password = clean(payload.get("password"))

    if not email or not password:
        raise BadRequestError("Missing email or password.")

    user = find_user_by_email(email)
    if user is None or user.password != password:
        logger.info("🚫 Failed login for %s", email)
        raise UnauthorizedError("Invalid email or password.")

    return user
