# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bloglist.api.deps import get_auth_usecase, get_db
from bloglist.application.auth.usecase import AuthUsecase
from bloglist.domain import schemas


router = APIRouter(prefix="/api/login", tags=["auth"])


@router.post("", response_model=schemas.LoginResponse)
def login(
    req: schemas.LoginRequest,
    db: Session = Depends(get_db),
    uc: AuthUsecase = Depends(get_auth_usecase),
):
    issued = uc.login(db, username=req.username, password=req.password)
    return schemas.LoginResponse(
        token=issued.token,
        username=issued.username,
        name=issued.name,
    )
