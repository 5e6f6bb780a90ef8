# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from bloglist.application.auth.password_service import PasswordService
from bloglist.application.auth.token_service import TokenService
from bloglist.infra.config import Settings
from bloglist.infra.db import Base, create_db_engine, create_session_factory


@dataclass
class AppContext:
    """进程级依赖（数据库、签名密钥、密码哈希），由 create_app 构造后挂在 app.state.ctx"""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker[Session]
    tokens: TokenService
    passwords: PasswordService

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = create_db_engine(settings.DATABASE_URL)
        if settings.DB_AUTO_CREATE:
            # 保证 ORM 模型已注册到 Base.metadata
            from bloglist.domain import models  # noqa: F401

            Base.metadata.create_all(bind=engine)

        return cls(
            settings=settings,
            engine=engine,
            session_factory=create_session_factory(engine),
            tokens=TokenService(
                settings.JWT_SECRET_KEY,
                expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
            ),
            passwords=PasswordService(),
        )

    def dispose(self) -> None:
        self.engine.dispose()
