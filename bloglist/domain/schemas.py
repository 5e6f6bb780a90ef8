# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------- users ----------

class UserCreateRequest(BaseModel):
    username: str
    # 长度校验放在 UserUsecase.register，错误信息统一为 "invalid password"
    password: Optional[str] = None
    name: Optional[str] = None


class UserPublic(BaseModel):
    """对外暴露的用户字段（不含 password_hash）"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    name: Optional[str] = None


class BlogSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    author: Optional[str] = None
    url: str


class UserResponse(UserPublic):
    blogs: List[BlogSummary] = Field(default_factory=list)


# ---------- login ----------

class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    username: str
    name: Optional[str] = None


# ---------- blogs ----------

class BlogCreateRequest(BaseModel):
    title: str = Field(min_length=1)
    author: Optional[str] = None
    url: str = Field(min_length=1)


class BlogUpdateRequest(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = None
    url: Optional[str] = Field(None, min_length=1)


class CommentCreateRequest(BaseModel):
    comment: str = Field(min_length=1)


class BlogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    author: Optional[str] = None
    url: str
    likes: int = 0
    user: Optional[UserPublic] = None
    likers: List[UserPublic] = Field(default_factory=list)
    comments: List[str] = Field(default_factory=list)

    @field_validator("comments", mode="before")
    @classmethod
    def _comment_bodies(cls, value: Any) -> Any:
        if value is None:
            return []
        return [getattr(c, "body", c) for c in value]
