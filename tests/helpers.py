# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy import func, select

from bloglist.domain import models
from bloglist.infra.context import AppContext

TEST_SECRET = "test-secret-key-for-bloglist-0123456789abcdef"

NON_EXISTING_ID = "67a493f358a23e48a12f5030"
MALFORMED_ID = "xxxxxxxxxxxxxxxxxxxxxxxx"

VALID_BLOG = {
    "title": "Hello, World!",
    "author": "John Doe",
    "url": "https://example.com",
}


def bearer(token: Optional[str]) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def count(ctx: AppContext, model) -> int:
    with ctx.session_factory() as s:
        return s.scalar(select(func.count()).select_from(model))


def blog_rows(ctx: AppContext) -> List[tuple]:
    """博客表快照，用于断言“数据库未改变”"""
    with ctx.session_factory() as s:
        rows = s.execute(
            select(models.Blog.id, models.Blog.title, models.Blog.author, models.Blog.url, models.Blog.likes)
            .order_by(models.Blog.id)
        ).all()
        return [tuple(r) for r in rows]
