# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bloglist.api.deps import get_db, get_user_usecase
from bloglist.application.users.usecase import UserUsecase
from bloglist.domain import schemas


router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[schemas.UserResponse])
def list_users(
    db: Session = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    return [schemas.UserResponse.model_validate(u) for u in uc.list_users(db)]


@router.post("", response_model=schemas.UserResponse, status_code=201)
def register(
    req: schemas.UserCreateRequest,
    db: Session = Depends(get_db),
    uc: UserUsecase = Depends(get_user_usecase),
):
    user = uc.register(db, username=req.username, password=req.password, name=req.name)
    return schemas.UserResponse.model_validate(user)
