# backend/faniko_bot/api_client.py

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

logger = logging.getLogger("faniko-bot.api")


class FanikoApiError(Exception):
    """Non-2xx answer from the API; `message` is the server's `error` text."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"[{status_code}] {message}")
        self.status_code = status_code
        self.message = message


def _clean_body(body: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in body.items() if v is not None}


class FanikoClient:
    """
    Async client for the Faniko REST API.
    One short-lived httpx client per call, same as the rest of the bot.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 20,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    # -------------------------------------------------
    # PLUMBING
    # -------------------------------------------------
    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                resp = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"[API] {method} {path} failed → {e}")
            raise FanikoApiError(0, "Faniko is unreachable right now. Please try again shortly.") from e

        if resp.is_error:
            try:
                message = resp.json().get("error") or resp.text
            except ValueError:
                message = resp.text
            logger.warning(f"[API] {method} {path} → {resp.status_code} {message}")
            raise FanikoApiError(resp.status_code, message)

        return resp.json()

    @staticmethod
    def _creator_path(username: str, suffix: str = "") -> str:
        return f"/api/creators/{quote(username, safe='')}{suffix}"

    # -------------------------------------------------
    # AUTH
    # -------------------------------------------------
    async def signup(self, email: str, username: str, password: str) -> Dict[str, Any]:
        return await self._request(
            "POST",
            "/api/auth/signup",
            json={"email": email, "username": username, "password": password},
        )

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        return await self._request(
            "POST",
            "/api/auth/login",
            json={"email": email.strip().lower(), "password": password.strip()},
        )

    # -------------------------------------------------
    # CREATORS
    # -------------------------------------------------
    async def list_creators(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/api/creators")

    async def get_creator(self, username: str) -> Dict[str, Any]:
        return await self._request("GET", self._creator_path(username))

    async def apply_creator(
        self,
        display_name: str,
        username: str,
        email: str,
        account_type: str,
        price: Optional[float] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        data = _clean_body({
            "displayName": display_name,
            "username": username,
            "email": email,
            "accountType": account_type,
            "price": None if price is None else str(price),
        })
        return await self._request("POST", "/api/creators", data=data, files=files)

    async def update_creator(self, username: str, **changes: Any) -> Dict[str, Any]:
        """changes: displayName / accountType / price"""
        return await self._request("PATCH", self._creator_path(username), json=_clean_body(changes))

    # -------------------------------------------------
    # POSTS
    # -------------------------------------------------
    async def list_posts(self, username: str) -> List[Dict[str, Any]]:
        return await self._request("GET", self._creator_path(username, "/posts"))

    async def create_post(
        self,
        username: str,
        title: str,
        visibility: str,
        price: Optional[float] = None,
        description: Optional[str] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        data = _clean_body({
            "title": title,
            "visibility": visibility,
            "price": None if price is None else str(price),
            "description": description,
        })
        return await self._request("POST", self._creator_path(username, "/posts"), data=data, files=files)

    async def update_post(self, username: str, post_id: int, **changes: Any) -> Dict[str, Any]:
        """changes: title / visibility / price / description"""
        return await self._request(
            "PATCH", self._creator_path(username, f"/posts/{post_id}"), json=_clean_body(changes)
        )

    async def delete_post(self, username: str, post_id: int) -> Dict[str, Any]:
        return await self._request("DELETE", self._creator_path(username, f"/posts/{post_id}"))

    async def like(self, username: str, post_id: int, fan_username: str) -> Dict[str, Any]:
        return await self._request(
            "POST",
            self._creator_path(username, f"/posts/{post_id}/like"),
            json={"fanUsername": fan_username},
        )

    # -------------------------------------------------
    # MONEY
    # -------------------------------------------------
    async def tip(
        self,
        username: str,
        amount: float,
        fan_username: Optional[str] = None,
        fan_email: Optional[str] = None,
        message: Optional[str] = None,
        post_id: Optional[int] = None,
    ) -> Dict[str, Any]:
        body = _clean_body({
            "amount": amount,
            "fanUsername": fan_username,
            "fanEmail": fan_email,
            "message": message,
            "postId": post_id,
        })
        return await self._request("POST", self._creator_path(username, "/tips"), json=body)

    async def unlock(
        self,
        username: str,
        post_id: int,
        fan_username: Optional[str] = None,
        fan_email: Optional[str] = None,
    ) -> Dict[str, Any]:
        body = _clean_body({"fanUsername": fan_username, "fanEmail": fan_email})
        return await self._request(
            "POST", self._creator_path(username, f"/posts/{post_id}/unlock"), json=body
        )

    async def unlocked_post_ids(self, username: str, fan_username: str) -> List[int]:
        data = await self._request(
            "GET", self._creator_path(username, "/unlocks"), params={"fanUsername": fan_username}
        )
        return list(data.get("postIds") or [])

    async def subscribe(
        self,
        username: str,
        fan_username: Optional[str] = None,
        fan_email: Optional[str] = None,
    ) -> Dict[str, Any]:
        body = _clean_body({"fanUsername": fan_username, "fanEmail": fan_email})
        return await self._request("POST", self._creator_path(username, "/subscribe"), json=body)

    async def subscription_status(self, username: str, fan_username: str) -> Dict[str, Any]:
        return await self._request(
            "GET", self._creator_path(username, "/subscription"), params={"fanUsername": fan_username}
        )

    async def subscribers(self, username: str) -> List[Dict[str, Any]]:
        return await self._request("GET", self._creator_path(username, "/subscribers"))

    async def earnings(self, username: str) -> Dict[str, Any]:
        return await self._request("GET", self._creator_path(username, "/earnings"))
