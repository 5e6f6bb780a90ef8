# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""uvicorn 入口：uvicorn bloglist.asgi:app"""

from __future__ import annotations

from bloglist.main import create_app

app = create_app()
