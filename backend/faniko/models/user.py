# backend/faniko/models/user.py

from typing import Any, Dict, Literal

from faniko.models.base import Record

Role = Literal["fan", "creator"]


class User(Record):
    id: int
    email: str
    username: str
    password: str  # plaintext (MVP)
    role: Role = "fan"
    email_verified: bool = False
    created_at: str

    def public(self) -> Dict[str, Any]:
        """Safe user object: never includes the password."""
        return {
            "id": self.id,
            "email": self.email,
            "username": self.username,
            "role": self.role,
        }
