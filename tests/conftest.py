# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""
公共 fixture：每个测试一个独立的内存 SQLite 应用实例
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Tuple

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from bloglist.infra.config import Settings
from bloglist.infra.context import AppContext
from bloglist.main import create_app
from tests.helpers import TEST_SECRET, VALID_BLOG, bearer


@pytest.fixture
def settings() -> Settings:
    return Settings(
        ENV="test",
        LOG_LEVEL="WARNING",
        DATABASE_URL="sqlite://",
        DB_AUTO_CREATE=True,
        JWT_SECRET_KEY=TEST_SECRET,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def ctx(app: FastAPI) -> AppContext:
    return app.state.ctx


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(ctx: AppContext) -> Iterator[Session]:
    session = ctx.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(client: TestClient) -> Callable[..., Tuple[str, str]]:
    """注册并登录，返回 (user_id, token)"""

    def _make(username: str = "root", password: str = "secure_password", name: Optional[str] = None):
        created = client.post("/api/users", json={"username": username, "password": password, "name": name})
        assert created.status_code == 201, created.text
        login = client.post("/api/login", json={"username": username, "password": password})
        assert login.status_code == 200, login.text
        return created.json()["id"], login.json()["token"]

    return _make


@pytest.fixture
def root(make_user) -> Tuple[str, str]:
    return make_user("root", "secure_password", "Root User")


@pytest.fixture
def other(make_user) -> Tuple[str, str]:
    return make_user("mallory", "another_password", "Mallory")


@pytest.fixture
def create_blog(client: TestClient) -> Callable[..., dict]:
    def _create(token: str, **overrides) -> dict:
        payload = {**VALID_BLOG, **overrides}
        resp = client.post("/api/blogs", json=payload, headers=bearer(token))
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
