# backend/faniko/routes/post_routes.py

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, File, Form, UploadFile

from faniko.services import post_service

router = APIRouter(prefix="/api/creators/{username}/posts", tags=["posts"])


@router.get("")
def list_posts(username: str):
    return [p.to_json() for p in post_service.list_posts(username)]


# -------------------------------------------------
# CREATE POST (optional image/video under "media")
# -------------------------------------------------
@router.post("")
def create_post(
    username: str,
    title: Optional[str] = Form(None),
    visibility: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    media: Optional[UploadFile] = File(None),
):
    post = post_service.create(
        username,
        {
            "title": title,
            "visibility": visibility,
            "price": price,
            "description": description,
        },
        media=media,
    )
    return {"success": True, "post": post.to_json()}


@router.patch("/{post_id}")
def update_post(username: str, post_id: str, payload: Optional[Dict[str, Any]] = Body(None)):
    post = post_service.update(username, post_id, payload or {})
    return {"success": True, "post": post.to_json()}


@router.delete("/{post_id}")
def delete_post(username: str, post_id: str):
    post_service.delete(username, post_id)
    return {"success": True}


# -------------------------------------------------
# LIKE / UNLIKE
# Body: {fanUsername}
# -------------------------------------------------
@router.post("/{post_id}/like")
def like_post(username: str, post_id: str, payload: Optional[Dict[str, Any]] = Body(None)):
    post, liked_by_me = post_service.toggle_like(username, post_id, payload or {})
    return {
        "success": True,
        "postId": post.id,
        "likes": post.likes,
        "likedByMe": liked_by_me,
    }
