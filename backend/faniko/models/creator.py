# backend/faniko/models/creator.py

from typing import Literal, Optional, Union

from faniko.models.base import Record

AccountType = Literal["free", "subscription"]
ACCOUNT_TYPES = ("free", "subscription")


class Creator(Record):
    id: int
    display_name: str
    username: str
    email: str
    account_type: AccountType
    price: Optional[Union[int, float]] = None

    # KYC uploads (filenames inside the uploads dir)
    id_front_path: Optional[str] = None
    id_back_path: Optional[str] = None
    selfie_path: Optional[str] = None

    created_at: str
    status: str = "pending"

    @property
    def has_subscription_plan(self) -> bool:
        return (
            self.account_type == "subscription"
            and isinstance(self.price, (int, float))
            and self.price > 0
        )
