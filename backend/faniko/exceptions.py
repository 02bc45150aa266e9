from typing import Any, Dict, Optional

from fastapi import HTTPException


class FanikoError(HTTPException):
    def __init__(self, status_code: int, detail: str, headers: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class BadRequestError(FanikoError):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class UnauthorizedError(FanikoError):
    def __init__(self, detail: str = "Invalid email or password."):
        super().__init__(status_code=401, detail=detail)


class NotFoundError(FanikoError):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class ConflictError(FanikoError):
    def __init__(self, detail: str):
        super().__init__(status_code=409, detail=detail)


class CreatorNotFound(NotFoundError):
    def __init__(self):
        super().__init__("Creator not found")


class PostNotFound(NotFoundError):
    def __init__(self):
        super().__init__("Post not found")
