# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Dict

import jwt

from bloglist.common.errors import AuthenticationError


@dataclass(frozen=True)
class Principal:
    """token 解出的身份，仅在单次请求内有效"""
    id: str
    username: str


class TokenService:
    def __init__(self, secret: str, *, expire_minutes: int = 15) -> None:
        self._jwt_secret = secret
        self._jwt_alg = "HS256"
        self._ttl = int(expire_minutes) * 60

    @property
    def ttl_seconds(self) -> int:
        return self._ttl

    def sign(self, *, user_id: str, username: str) -> str:
        now = int(time.time())
        payload: Dict[str, Any] = {
            "username": username,
            "id": user_id,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._jwt_secret, algorithm=self._jwt_alg)

    def verify(self, token: str) -> Principal:
        try:
            payload = jwt.decode(token, self._jwt_secret, algorithms=[self._jwt_alg])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("token expired") from e
        except jwt.InvalidTokenError as e:
            raise AuthenticationError("invalid token") from e

        user_id = payload.get("id")
        if not user_id:
            raise AuthenticationError("unknown user")
        return Principal(id=str(user_id), username=str(payload.get("username") or ""))
