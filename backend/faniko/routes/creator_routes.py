# backend/faniko/routes/creator_routes.py

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, File, Form, UploadFile

from faniko.services import creator_service

router = APIRouter(prefix="/api/creators", tags=["creators"])


# -------------------------------------------------
# APPLY AS CREATOR (KYC multipart form)
# -------------------------------------------------
@router.post("")
def create_creator(
    display_name: Optional[str] = Form(None, alias="displayName"),
    username: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    account_type: Optional[str] = Form(None, alias="accountType"),
    price: Optional[str] = Form(None),
    id_front: Optional[UploadFile] = File(None, alias="idFront"),
    id_back: Optional[UploadFile] = File(None, alias="idBack"),
    selfie: Optional[UploadFile] = File(None),
):
    """
    Creates a pending creator and upgrades a matching fan account.
    Usernames and emails are unique across creators (case-insensitive).
    """
    record = creator_service.apply(
        {
            "displayName": display_name,
            "username": username,
            "email": email,
            "accountType": account_type,
            "price": price,
        },
        id_front=id_front,
        id_back=id_back,
        selfie=selfie,
    )
    return {"success": True, "creatorId": record.id}


# -------------------------------------------------
# EXPLORE
# -------------------------------------------------
@router.get("")
def list_creators():
    return [c.to_json() for c in creator_service.list_creators()]


@router.get("/{username}")
def get_creator(username: str):
    return creator_service.get_creator(username).to_json()


# -------------------------------------------------
# UPDATE PROFILE (displayName, accountType, price)
# -------------------------------------------------
@router.patch("/{username}")
def update_creator(username: str, payload: Optional[Dict[str, Any]] = Body(None)):
    creator = creator_service.update(username, payload or {})
    return {"success": True, "creator": creator.to_json()}
