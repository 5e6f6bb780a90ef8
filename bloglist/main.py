# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from bloglist.api import auth as auth_api, blogs as blogs_api, users as users_api
from bloglist.common.exception_handlers import register_exception_handlers
from bloglist.common.logging import setup_logging
from bloglist.common.middlewares import TraceIdMiddleware
from bloglist.infra.config import Settings
from bloglist.infra.context import AppContext


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL)

    ctx = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        ctx.dispose()

    app = FastAPI(
        title="bloglist",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.ctx = ctx

    # ---------- middlewares / handlers ----------

    app.add_middleware(TraceIdMiddleware, log_requests=settings.ENV == "dev")
    register_exception_handlers(app)

    @app.get("/health")
    def health_check() -> dict:
        return {"status": "ok"}

    app.include_router(auth_api.router)
    app.include_router(users_api.router)
    app.include_router(blogs_api.router)

    return app
