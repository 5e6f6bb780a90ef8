# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """错误分类（封闭集合），状态码映射见 exception_handlers.status_for"""

    VALIDATION = "validation"
    CAST = "cast"
    UNIQUENESS = "uniqueness"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    UNKNOWN_ROUTE = "unknown_route"


@dataclass(eq=False)
class AppError(Exception):
    """异常统一"""
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


class ValidationError(AppError):
    def __init__(self, message: str = "validation failed") -> None:
        super().__init__(kind=ErrorKind.VALIDATION, message=message)


class CastError(AppError):
    def __init__(self, value: str, path: str = "id") -> None:
        super().__init__(
            kind=ErrorKind.CAST,
            message=f'cast to ObjectId failed for value "{value}" at path "{path}"',
        )


class UniquenessError(AppError):
    def __init__(self, field: str) -> None:
        super().__init__(kind=ErrorKind.UNIQUENESS, message=f"expected `{field}` to be unique")


class AuthenticationError(AppError):
    def __init__(self, message: str = "unauthenticated") -> None:
        super().__init__(kind=ErrorKind.AUTHENTICATION, message=message)


class AuthorizationError(AppError):
    def __init__(self, message: str = "unauthorized user") -> None:
        super().__init__(kind=ErrorKind.AUTHORIZATION, message=message)


class BlogNotFound(AppError):
    def __init__(self, message: str = "blog not found") -> None:
        super().__init__(kind=ErrorKind.NOT_FOUND, message=message)


class UnknownEndpoint(AppError):
    def __init__(self) -> None:
        super().__init__(kind=ErrorKind.UNKNOWN_ROUTE, message="unknown endpoint")
