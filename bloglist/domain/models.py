# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import re
import secrets
import time
from typing import List, Optional

from sqlalchemy import BigInteger, Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bloglist.infra.db import Base

OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")


def _ts_ms() -> int:
    return int(time.time() * 1000)


def new_object_id() -> str:
    """24 位十六进制 id"""
    return secrets.token_hex(12)


def is_object_id(value: object) -> bool:
    return isinstance(value, str) and OBJECT_ID_RE.match(value) is not None


blog_likes = Table(
    "blog_likes",
    Base.metadata,
    Column("blog_id", String(24), ForeignKey("blogs.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", String(24), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    username: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False, default=_ts_ms)

    blogs: Mapped[List["Blog"]] = relationship(
        "Blog",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Blog.created_at",
    )


class Blog(Base):
    __tablename__ = "blogs"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # 创建后不再变更
    user_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False, default=_ts_ms)

    user: Mapped["User"] = relationship("User", back_populates="blogs")
    likers: Mapped[List["User"]] = relationship("User", secondary=blog_likes, order_by="User.username")
    comments: Mapped[List["BlogComment"]] = relationship(
        "BlogComment",
        back_populates="blog",
        cascade="all, delete-orphan",
        order_by="BlogComment.id",
    )


class BlogComment(Base):
    __tablename__ = "blog_comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    blog_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False, default=_ts_ms)

    blog: Mapped["Blog"] = relationship("Blog", back_populates="comments")
