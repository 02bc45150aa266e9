# backend/faniko/routes/auth_routes.py

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body

from faniko.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["auth"])


# -------------------------------------------------
# SIGNUP (fans / normal users)
# -------------------------------------------------
@router.post("/signup")
def signup(payload: Optional[Dict[str, Any]] = Body(None)):
    """
    Body: {email, username, password}
    Returns the safe user object (no password).
    """
    user = auth_service.signup(payload or {})
    return user.public()


# -------------------------------------------------
# LOGIN (plaintext password check, MVP)
# -------------------------------------------------
@router.post("/login")
def login(payload: Optional[Dict[str, Any]] = Body(None)):
    user = auth_service.login(payload or {})
    return user.public()
