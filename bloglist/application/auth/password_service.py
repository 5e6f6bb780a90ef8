# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from passlib.context import CryptContext


class PasswordService:
    """密码哈希，pbkdf2_sha256（纯 hashlib 实现，无需额外后端）"""

    def __init__(self) -> None:
        self._ctx = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._ctx.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        return self._ctx.verify(password, password_hash)
