# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""
BlogUsecase 单元测试：直接操作内存库，覆盖点赞计数与并发重复点赞
"""

from __future__ import annotations

import pytest

from bloglist.application import pipeline as pl
from bloglist.application.blogs.usecase import BlogUsecase
from bloglist.domain import models


@pytest.fixture
def owner(db):
    user = models.User(username="owner", password_hash="x")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def fan(db):
    user = models.User(username="fan", password_hash="x")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def blog_id(db, owner):
    b = models.Blog(title="T", author="A", url="u")
    owner.blogs.append(b)
    db.commit()
    return b.id


class TestLike:
    def test_counter_equals_likers(self, db, owner, fan, blog_id):
        uc = BlogUsecase()
        blog = pl.locate_blog(db, blog_id)

        uc.like(db, user=fan, blog=blog)
        uc.like(db, user=owner, blog=blog)
        uc.like(db, user=fan, blog=blog)

        assert blog.likes == len(blog.likers) == 2

    def test_concurrent_duplicate_treated_as_liked(self, ctx, db, fan, blog_id):
        blog = pl.locate_blog(db, blog_id)
        assert blog.likers == []

        # 另一个请求抢先写入了同一条点赞记录
        with ctx.session_factory() as other:
            other.execute(models.blog_likes.insert().values(blog_id=blog_id, user_id=fan.id))
            other.commit()

        result = BlogUsecase().like(db, user=fan, blog=blog)

        assert [u.id for u in result.likers] == [fan.id]
        assert result.likes == 1
