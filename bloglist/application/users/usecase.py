# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from bloglist.application.auth.password_service import PasswordService
from bloglist.common.errors import UniquenessError, ValidationError
from bloglist.domain import models


class UserUsecase:
    def __init__(
        self,
        passwords: PasswordService,
        *,
        username_min_length: int = 3,
        password_min_length: int = 3,
    ) -> None:
        self._passwords = passwords
        self._username_min = username_min_length
        self._password_min = password_min_length

    def list_users(self, db: Session) -> List[models.User]:
        stmt = (
            select(models.User)
            .options(selectinload(models.User.blogs))
            .order_by(models.User.created_at.asc())
        )
        return list(db.scalars(stmt).all())

    def register(
        self,
        db: Session,
        *,
        username: str,
        password: Optional[str],
        name: Optional[str] = None,
    ) -> models.User:
        # 先校验再写库，失败时用户数不变
        if not isinstance(password, str) or len(password) < self._password_min:
            raise ValidationError("invalid password")

        if len(username or "") < self._username_min:
            raise ValidationError(
                f"User validation failed: username: shorter than the minimum allowed length ({self._username_min})"
            )

        existed = db.query(models.User).filter(models.User.username == username).first()
        if existed is not None:
            raise UniquenessError("username")

        user = models.User(
            username=username,
            password_hash=self._passwords.hash(password),
            name=name,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError as e:
            # 并发注册同名用户，由唯一索引兜底
            db.rollback()
            raise UniquenessError("username") from e

        db.refresh(user)
        return user
