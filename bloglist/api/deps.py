# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Callable, Generator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bloglist.application.auth.usecase import AuthUsecase
from bloglist.application.blogs.usecase import BlogUsecase
from bloglist.application.pipeline import Requirements, RequestScope, run_pipeline
from bloglist.application.users.usecase import UserUsecase
from bloglist.infra.context import AppContext


def get_context(request: Request) -> AppContext:
    return request.app.state.ctx


def get_db(ctx: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    db = ctx.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_auth_usecase(ctx: AppContext = Depends(get_context)) -> AuthUsecase:
    return AuthUsecase(ctx.passwords, ctx.tokens)


def get_user_usecase(ctx: AppContext = Depends(get_context)) -> UserUsecase:
    return UserUsecase(
        ctx.passwords,
        username_min_length=ctx.settings.USERNAME_MIN_LENGTH,
        password_min_length=ctx.settings.PASSWORD_MIN_LENGTH,
    )


_blog_uc_singleton = BlogUsecase()


def get_blog_usecase() -> BlogUsecase:
    return _blog_uc_singleton


_bearer = HTTPBearer(auto_error=False)


def pipeline(req: Requirements) -> Callable[..., RequestScope]:
    """把路由声明的检查链包装成 FastAPI 依赖；与 handler 共用同一个 Session"""

    def _run(
        request: Request,
        db: Session = Depends(get_db),
        ctx: AppContext = Depends(get_context),
        credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    ) -> RequestScope:
        token = credentials.credentials if credentials is not None else None
        return run_pipeline(
            req,
            db=db,
            tokens=ctx.tokens,
            token=token,
            blog_id=request.path_params.get("blog_id"),
        )

    return _run
