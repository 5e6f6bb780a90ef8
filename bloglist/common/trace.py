# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import secrets
from contextvars import ContextVar, Token


_trace_id_ctx: ContextVar[str] = ContextVar("bloglist_trace_id", default="-")


def new_trace_id() -> str:
    return secrets.token_hex(8)


def set_trace_id(trace_id: str) -> Token[str]:
    return _trace_id_ctx.set(trace_id or "-")


def reset_trace_id(token: Token[str]) -> None:
    _trace_id_ctx.reset(token)


def get_trace_id() -> str:
    return _trace_id_ctx.get() or "-"
