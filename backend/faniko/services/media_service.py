# backend/faniko/services/media_service.py

import os
import time
import random
import shutil
import logging
from typing import Optional, Tuple

from fastapi import UploadFile

from faniko import config

logger = logging.getLogger("faniko-backend.media")


def ensure_uploads_dir() -> None:
    config.UPLOADS_DIR.mkdir(parents=True, exist_ok=True)


def build_filename(fieldname: str, original_name: Optional[str]) -> str:
    """
    `<field>-<epoch ms>-<random><ext>`, e.g. `idFront-1718000000000-123456789.png`
    """
    unique = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    ext = os.path.splitext(original_name or "")[1]
    return f"{fieldname}-{unique}{ext}"


def save_upload(fieldname: str, upload: Optional[UploadFile]) -> Optional[str]:
    """
    Writes an uploaded file into the uploads dir.
    Returns the stored filename, or None when nothing was sent.
    """
    if upload is None or not upload.filename:
        return None

    ensure_uploads_dir()
    filename = build_filename(fieldname, upload.filename)
    target = config.UPLOADS_DIR / filename

    with open(target, "wb") as out:
        shutil.copyfileobj(upload.file, out)

    logger.info("📁 Stored upload field=%s file=%s", fieldname, filename)
    return filename


def save_media(upload: Optional[UploadFile]) -> Tuple[Optional[str], Optional[str]]:
    """Post media: (filename, mime) or (None, None)."""
    filename = save_upload("media", upload)
    if filename is None:
        return None, None
    return filename, upload.content_type
