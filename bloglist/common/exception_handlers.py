# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""错误映射：所有失败在这里统一转换为 (status, {"error": message})

优先级（先匹配先生效）：
    VALIDATION / CAST / UNIQUENESS -> 400
    AUTHENTICATION                 -> 401
    AUTHORIZATION                  -> 403
    NOT_FOUND                      -> 404
    UNKNOWN_ROUTE                  -> 404 {"error": "unknown endpoint"}
其余异常交给框架默认处理。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, assert_never

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bloglist.common.errors import (
    AppError,
    ErrorKind,
    UniquenessError,
    UnknownEndpoint,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _err_payload(message: str) -> Dict[str, Any]:
    return {"error": message}


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(x) for x in err.get("loc", ()) if x != "body"]
        msg = err.get("msg", "invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid request"


# 各驱动的唯一约束报错前缀：sqlite / postgres / mysql
_UNIQUE_MARKERS = ("UNIQUE constraint failed", "duplicate key value", "Duplicate entry")


def _unique_field(exc: IntegrityError) -> Optional[str]:
    """唯一约束冲突时返回字段名，其他完整性错误（外键、非空等）返回 None"""

    # sqlite: "UNIQUE constraint failed: users.username"
    text = str(getattr(exc, "orig", exc))
    if not any(marker in text for marker in _UNIQUE_MARKERS):
        return None
    if "username" in text:
        return "username"
    return "value"


def classify(exc: Exception) -> Optional[AppError]:
    """把任意异常归入错误分类；无法归类时返回 None"""

    if isinstance(exc, AppError):
        return exc
    if isinstance(exc, RequestValidationError):
        return ValidationError(_validation_message(exc))
    if isinstance(exc, IntegrityError):
        field = _unique_field(exc)
        return UniquenessError(field) if field is not None else None
    if isinstance(exc, StarletteHTTPException) and exc.status_code in (404, 405):
        return UnknownEndpoint()
    return None


def status_for(kind: ErrorKind) -> int:
    match kind:
        case ErrorKind.VALIDATION | ErrorKind.CAST | ErrorKind.UNIQUENESS:
            return 400
        case ErrorKind.AUTHENTICATION:
            return 401
        case ErrorKind.AUTHORIZATION:
            return 403
        case ErrorKind.NOT_FOUND | ErrorKind.UNKNOWN_ROUTE:
            return 404
        case _:
            assert_never(kind)


def map_error(exc: Exception) -> Optional[Tuple[int, Dict[str, Any]]]:
    err = classify(exc)
    if err is None:
        return None
    return status_for(err.kind), _err_payload(err.message)


def _should_log(request: Request) -> bool:
    ctx = getattr(request.app.state, "ctx", None)
    return ctx is None or ctx.settings.ENV != "test"


async def app_error_handler(request: Request, exc: Exception) -> JSONResponse:
    mapped = map_error(exc)
    if mapped is None:
        if isinstance(exc, StarletteHTTPException):
            return await http_exception_handler(request, exc)
        return await unhandled_error_handler(request, exc)

    status_code, body = mapped
    if _should_log(request):
        logger.warning(
            "request failed: %s %s status=%s error=%s",
            request.method,
            request.url.path,
            status_code,
            body["error"],
        )
    return JSONResponse(status_code=status_code, content=body)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:  # noqa: ARG001
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content=_err_payload("internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    for exc_class in (AppError, RequestValidationError, IntegrityError, StarletteHTTPException):
        app.add_exception_handler(exc_class, app_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
