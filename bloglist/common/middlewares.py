# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from bloglist.common.trace import new_trace_id, reset_trace_id, set_trace_id

logger = logging.getLogger("bloglist.request")


class TraceIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, log_requests: bool = False) -> None:
        super().__init__(app)
        self._log_requests = log_requests

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        trace_id = request.headers.get("X-Request-Id") or new_trace_id()
        token = set_trace_id(trace_id)
        try:
            # 仅开发环境打印请求行
            if self._log_requests:
                logger.info("%s %s", request.method, request.url.path)
            response: Response = await call_next(request)
        finally:
            reset_trace_id(token)
        response.headers["X-Trace-Id"] = trace_id
        return response
