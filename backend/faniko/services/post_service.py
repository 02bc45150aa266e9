# backend/faniko/services/post_service.py

import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import UploadFile

from faniko.db import get_db
from faniko.exceptions import BadRequestError, PostNotFound
from faniko.models.post import VISIBILITIES, Post
from faniko.services.creator_service import get_creator
from faniko.services.media_service import save_media
from faniko.utils.helpers import clean, now_iso, same_name, to_int, to_number

logger = logging.getLogger("faniko-backend.posts")


# -------------------------------------------------
# LOOKUPS
# -------------------------------------------------
def find_post(username: str, post_id: Any) -> Optional[Post]:
    post_id = to_int(post_id)
    db = get_db()
    return next(
        (p for p in db.posts if p.id == post_id and same_name(p.username, username)),
        None,
    )


def get_post(username: str, post_id: Any) -> Post:
    post = find_post(username, post_id)
    if post is None:
        raise PostNotFound()
    return post


def list_posts(username: str) -> List[Post]:
    creator = get_creator(username)
    db = get_db()
    return [p for p in db.posts if same_name(p.username, creator.username)]


# -------------------------------------------------
# CREATE (optional image/video)
# -------------------------------------------------
def create(
    username: str,
    fields: Dict[str, Any],
    media: Optional[UploadFile] = None,
) -> Post:
    title = clean(fields.get("title"))
    visibility = clean(fields.get("visibility"))
    description = fields.get("description")

    db = get_db()
    with db.lock:
        creator = get_creator(username)

        if not title or not visibility:
            raise BadRequestError("Missing required fields")

        if visibility not in VISIBILITIES:
            raise BadRequestError("Invalid visibility")

        media_filename, media_mime = save_media(media)

        record = Post(
            id=db.next_id("posts"),
            creator_id=creator.id,
            username=creator.username,
            title=title,
            visibility=visibility,
            price=(to_number(fields.get("price")) or 0) if visibility == "ppv" else None,
            description=str(description) if description else "",
            created_at=now_iso(),
            media_filename=media_filename,
            media_mime=media_mime,
        )
        db.posts.append(record)

    logger.info(
        "🆕 New post: id=%s creator=%s visibility=%s price=%s media=%s",
        record.id, record.username, record.visibility, record.price, record.media_filename,
    )
    return record


# -------------------------------------------------
# EDIT (title, visibility, price, description)
# -------------------------------------------------
def update(username: str, post_id: Any, payload: Dict[str, Any]) -> Post:
    db = get_db()
    with db.lock:
        get_creator(username)
        post = get_post(username, post_id)

        title = payload.get("title")
        visibility = payload.get("visibility")
        price = payload.get("price")
        description = payload.get("description")

        if title is not None:
            new_title = clean(title)
            if new_title:
                post.title = new_title

        if visibility is not None:
            if visibility not in VISIBILITIES:
                raise BadRequestError("Invalid visibility")
            post.visibility = visibility

            if visibility == "ppv":
                post.price = to_number(price) or post.price or 0
            else:
                post.price = None

        elif price is not None and post.visibility == "ppv":
            post.price = to_number(price) or 0

        if description is not None:
            post.description = str(description)

    logger.info(
        "✏️ Updated post: id=%s creator=%s visibility=%s price=%s",
        post.id, post.username, post.visibility, post.price,
    )
    return post


# -------------------------------------------------
# DELETE (hard delete; transactions are kept)
# -------------------------------------------------
def delete(username: str, post_id: Any) -> Post:
    db = get_db()
    with db.lock:
        creator = get_creator(username)
        post = get_post(username, post_id)

        db.posts.remove(post)

        # drop dangling unlock entries for this post
        db.unlocked_posts[:] = [
            u for u in db.unlocked_posts
            if not (u.post_id == post.id and same_name(u.creator_username, creator.username))
        ]

    # Transactions stay, so earnings still count what fans already paid for.
    logger.info("🗑️ Deleted post: id=%s creator=%s", post.id, post.username)
    return post


# -------------------------------------------------
# LIKE / UNLIKE
# -------------------------------------------------
def toggle_like(username: str, post_id: Any, payload: Dict[str, Any]) -> Tuple[Post, bool]:
    fan_username = clean(payload.get("fanUsername"))

    db = get_db()
    with db.lock:
        get_creator(username)
        post = get_post(username, post_id)

        if not fan_username:
            raise BadRequestError("Missing fan username.")

        existing = next(
            (i for i, name in enumerate(post.liked_by) if same_name(str(name), fan_username)),
            None,
        )
        if existing is None:
            post.liked_by.append(fan_username)
            liked_by_me = True
        else:
            del post.liked_by[existing]
            liked_by_me = False

        post.likes = len(post.liked_by)

    logger.info(
        "❤️ Like toggle: post=%s fan=%s likes=%s likedByMe=%s",
        post.id, fan_username, post.likes, liked_by_me,
    )
    return post, liked_by_me
