# backend/faniko/models/post.py

from typing import List, Literal, Optional, Union

from pydantic import Field

from faniko.models.base import Record

Visibility = Literal["free", "ppv"]
VISIBILITIES = ("free", "ppv")


class Post(Record):
    id: int
    creator_id: int
    username: str
    title: str
    visibility: Visibility
    price: Optional[Union[int, float]] = None
    description: str = ""
    created_at: str

    # media
    media_filename: Optional[str] = None
    media_mime: Optional[str] = None

    # likes
    likes: int = 0
    liked_by: List[str] = Field(default_factory=list)

    @property
    def is_paid(self) -> bool:
        return (
            self.visibility == "ppv"
            and isinstance(self.price, (int, float))
            and self.price > 0
        )
