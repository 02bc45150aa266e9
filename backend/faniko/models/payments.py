# backend/faniko/models/payments.py

from typing import Literal, Optional, Union

from faniko.models.base import Record

TransactionType = Literal["tip", "ppv_unlock", "subscription"]
Amount = Union[int, float]


class Transaction(Record):
    id: int
    type: TransactionType
    creator_username: str
    fan_username: str = "anonymous"
    fan_email: Optional[str] = None
    amount: Amount
    currency: str = "USD"
    message: Optional[str] = None  # tips only
    post_id: Optional[Amount] = None  # tips keep whatever number the client sent
    created_at: str


class Subscription(Record):
    id: int
    creator_username: str
    fan_username: str = "anonymous"
    fan_email: Optional[str] = None
    price: Amount
    currency: str = "USD"
    status: str = "active"
    created_at: str


class UnlockedPost(Record):
    creator_username: str
    fan_username: str
    post_id: int
    created_at: str
