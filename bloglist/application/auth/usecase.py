# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from bloglist.application.auth.password_service import PasswordService
from bloglist.application.auth.token_service import TokenService
from bloglist.common.errors import AuthenticationError
from bloglist.domain import models


class AuthUsecase:
    def __init__(self, passwords: PasswordService, tokens: TokenService) -> None:
        self._passwords = passwords
        self._tokens = tokens

    def login(self, db: Session, *, username: str, password: str) -> "IssuedToken":
        user = db.query(models.User).filter(models.User.username == username).first()
        if user is None:
            raise AuthenticationError("invalid username")

        if not self._passwords.verify(password, user.password_hash):
            raise AuthenticationError("invalid password")

        token = self._tokens.sign(user_id=user.id, username=user.username)
        return IssuedToken(token=token, username=user.username, name=user.name)


@dataclass
class IssuedToken:
    token: str
    username: str
    name: Optional[str]
