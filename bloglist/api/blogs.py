# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from bloglist.api.deps import get_blog_usecase, get_db, pipeline
from bloglist.application.blogs.usecase import BlogUsecase
from bloglist.application.pipeline import RequestScope, Stage, requires
from bloglist.domain import schemas


router = APIRouter(prefix="/api/blogs", tags=["blogs"])

# 各路由需要的检查阶段；执行顺序由 run_pipeline 固定
LOAD_BLOG = requires(Stage.RESOURCE)
AUTHENTICATED = requires(Stage.PRINCIPAL)
AUTHENTICATED_BLOG = requires(Stage.PRINCIPAL, Stage.RESOURCE)
OWNED_BLOG = requires(Stage.AUTHORIZATION, missing_ok=True)


@router.get("", response_model=List[schemas.BlogResponse])
def list_blogs(
    db: Session = Depends(get_db),
    uc: BlogUsecase = Depends(get_blog_usecase),
):
    return [schemas.BlogResponse.model_validate(b) for b in uc.list_blogs(db)]


@router.get("/{blog_id}", response_model=schemas.BlogResponse)
def get_blog(
    blog_id: str,
    scope: RequestScope = Depends(pipeline(LOAD_BLOG)),
):
    return schemas.BlogResponse.model_validate(scope.blog)


@router.post("", response_model=schemas.BlogResponse, status_code=201)
def create_blog(
    req: schemas.BlogCreateRequest,
    db: Session = Depends(get_db),
    scope: RequestScope = Depends(pipeline(AUTHENTICATED)),
    uc: BlogUsecase = Depends(get_blog_usecase),
):
    blog = uc.create(db, user=scope.user, req=req)
    return schemas.BlogResponse.model_validate(blog)


@router.put("/{blog_id}", response_model=schemas.BlogResponse)
def update_blog(
    blog_id: str,
    req: schemas.BlogUpdateRequest,
    db: Session = Depends(get_db),
    scope: RequestScope = Depends(pipeline(AUTHENTICATED_BLOG)),
    uc: BlogUsecase = Depends(get_blog_usecase),
):
    blog = uc.update(db, blog=scope.blog, req=req)
    return schemas.BlogResponse.model_validate(blog)


@router.post("/{blog_id}/like", response_model=schemas.BlogResponse)
def like_blog(
    blog_id: str,
    db: Session = Depends(get_db),
    scope: RequestScope = Depends(pipeline(AUTHENTICATED_BLOG)),
    uc: BlogUsecase = Depends(get_blog_usecase),
):
    blog = uc.like(db, user=scope.user, blog=scope.blog)
    return schemas.BlogResponse.model_validate(blog)


@router.post("/{blog_id}/comments", response_model=schemas.BlogResponse)
def comment_blog(
    blog_id: str,
    req: schemas.CommentCreateRequest,
    db: Session = Depends(get_db),
    scope: RequestScope = Depends(pipeline(AUTHENTICATED_BLOG)),
    uc: BlogUsecase = Depends(get_blog_usecase),
):
    blog = uc.comment(db, blog=scope.blog, text=req.comment)
    return schemas.BlogResponse.model_validate(blog)


@router.delete("/{blog_id}", status_code=204)
def delete_blog(
    blog_id: str,
    db: Session = Depends(get_db),
    scope: RequestScope = Depends(pipeline(OWNED_BLOG)),
    uc: BlogUsecase = Depends(get_blog_usecase),
):
    # 已不存在的 id 视为删除成功，同样返回 204
    uc.delete(db, user=scope.user, blog=scope.blog)
    return Response(status_code=204)
