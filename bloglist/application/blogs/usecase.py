# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from bloglist.domain import models, schemas

logger = logging.getLogger(__name__)


class BlogUsecase:
    """博客读写；调用前 pipeline 已完成身份、资源与归属校验"""

    def list_blogs(self, db: Session) -> List[models.Blog]:
        stmt = (
            select(models.Blog)
            .options(
                selectinload(models.Blog.user),
                selectinload(models.Blog.likers),
                selectinload(models.Blog.comments),
            )
            .order_by(models.Blog.created_at.asc())
        )
        return list(db.scalars(stmt).all())

    def create(self, db: Session, *, user: models.User, req: schemas.BlogCreateRequest) -> models.Blog:
        # likes 只由点赞集合推导，新博客从 0 开始
        blog = models.Blog(
            title=req.title,
            author=req.author,
            url=req.url,
            likes=0,
        )
        # 经由关系追加，blog.user_id 与 user.blogs 在同一次提交里写入
        user.blogs.append(blog)
        db.add(blog)
        db.commit()
        db.refresh(blog)

        logger.info("blog created: id=%s user=%s", blog.id, user.id)
        return blog

    def update(self, db: Session, *, blog: models.Blog, req: schemas.BlogUpdateRequest) -> models.Blog:
        # TODO: 是否只允许作者修改待产品确认，目前任意已登录用户可改（删除才校验归属）
        changes = req.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in changes.items():
            setattr(blog, key, value)
        db.commit()
        return blog

    def like(self, db: Session, *, user: models.User, blog: models.Blog) -> models.Blog:
        # 同一用户重复点赞不计数
        if any(u.id == user.id for u in blog.likers):
            return blog

        blog.likers.append(user)
        blog.likes = len(blog.likers)
        try:
            db.commit()
        except IntegrityError:
            # 并发的重复点赞撞上 blog_likes 主键，按已点赞处理
            db.rollback()
            db.refresh(blog)
            blog.likes = len(blog.likers)
            db.commit()
            logger.info("duplicate like ignored: blog=%s user=%s", blog.id, user.id)
        return blog

    def comment(self, db: Session, *, blog: models.Blog, text: str) -> models.Blog:
        blog.comments.append(models.BlogComment(body=text))
        db.commit()
        return blog

    def delete(self, db: Session, *, user: models.User, blog: Optional[models.Blog]) -> None:
        if blog is None:
            return

        if blog in user.blogs:
            user.blogs.remove(blog)
        db.delete(blog)
        db.commit()

        logger.info("blog deleted: id=%s user=%s", blog.id, user.id)
