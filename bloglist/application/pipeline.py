# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""请求前置检查链

每个路由用 requires(...) 声明需要哪些阶段，run_pipeline 按固定顺序执行：

    CREDENTIAL -> PRINCIPAL -> RESOURCE -> AUTHORIZATION

任一阶段失败直接抛出 AppError，由 exception_handlers 统一映射。
顺序保证：非法 id (400) 一定先于越权 (403) 被发现，鉴权闸门不会在资源加载失败后执行。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from bloglist.application.auth.token_service import Principal, TokenService
from bloglist.common.errors import AuthenticationError, AuthorizationError, BlogNotFound, CastError
from bloglist.domain import models

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    CREDENTIAL = "credential"
    PRINCIPAL = "principal"
    RESOURCE = "resource"
    AUTHORIZATION = "authorization"


STAGE_ORDER = (Stage.CREDENTIAL, Stage.PRINCIPAL, Stage.RESOURCE, Stage.AUTHORIZATION)

_IMPLIES: Dict[Stage, FrozenSet[Stage]] = {
    Stage.CREDENTIAL: frozenset(),
    Stage.PRINCIPAL: frozenset({Stage.CREDENTIAL}),
    Stage.RESOURCE: frozenset(),
    Stage.AUTHORIZATION: frozenset({Stage.PRINCIPAL, Stage.RESOURCE}),
}


@dataclass(frozen=True)
class Requirements:
    stages: FrozenSet[Stage]
    missing_ok: bool = False

    def __contains__(self, stage: object) -> bool:
        return stage in self.stages


def requires(*stages: Stage, missing_ok: bool = False) -> Requirements:
    """声明路由需要的阶段，依赖关系自动补全（AUTHORIZATION 隐含 PRINCIPAL、RESOURCE 等）"""

    closed = set(stages)
    pending = list(stages)
    while pending:
        for implied in _IMPLIES[pending.pop()]:
            if implied not in closed:
                closed.add(implied)
                pending.append(implied)
    return Requirements(stages=frozenset(closed), missing_ok=missing_ok)


@dataclass
class RequestScope:
    principal: Optional[Principal] = None
    user: Optional[models.User] = None
    blog: Optional[models.Blog] = None
    completed: List[Stage] = field(default_factory=list)


# ---------- stages ----------

def verify_credential(tokens: TokenService, token: Optional[str]) -> Principal:
    if not token:
        raise AuthenticationError("token missing")
    return tokens.verify(token)


def resolve_principal(db: Session, principal: Principal) -> models.User:
    user = db.get(models.User, principal.id) if models.is_object_id(principal.id) else None
    if user is None:
        raise AuthenticationError("invalid user")
    return user


def locate_blog(
    db: Session,
    blog_id: Optional[str],
    *,
    populate: bool = True,
    missing_ok: bool = False,
) -> Optional[models.Blog]:
    if not models.is_object_id(blog_id):
        raise CastError(str(blog_id), path="_id")

    stmt = select(models.Blog).where(models.Blog.id == blog_id.lower())
    if populate:
        stmt = stmt.options(
            selectinload(models.Blog.user),
            selectinload(models.Blog.likers),
            selectinload(models.Blog.comments),
        )
    blog = db.scalars(stmt).first()

    if blog is None and not missing_ok:
        raise BlogNotFound()
    return blog


def authorize_owner(user: models.User, blog: models.Blog) -> None:
    if blog.user_id != user.id:
        raise AuthorizationError("unauthorized user")


# ---------- composition ----------

def run_pipeline(
    req: Requirements,
    *,
    db: Session,
    tokens: TokenService,
    token: Optional[str],
    blog_id: Optional[str] = None,
) -> RequestScope:
    scope = RequestScope()

    for stage in STAGE_ORDER:
        if stage not in req:
            continue

        if stage is Stage.CREDENTIAL:
            scope.principal = verify_credential(tokens, token)
        elif stage is Stage.PRINCIPAL:
            if scope.principal is None:
                raise AuthenticationError("token missing")
            scope.user = resolve_principal(db, scope.principal)
        elif stage is Stage.RESOURCE:
            scope.blog = locate_blog(db, blog_id, missing_ok=req.missing_ok)
        elif stage is Stage.AUTHORIZATION:
            if scope.user is None:
                raise AuthenticationError("invalid user")
            # 资源已不存在（missing_ok）时没有可校验的归属
            if scope.blog is None:
                continue
            authorize_owner(scope.user, scope.blog)

        scope.completed.append(stage)

    logger.debug("pipeline passed: stages=%s", [s.value for s in scope.completed])
    return scope
