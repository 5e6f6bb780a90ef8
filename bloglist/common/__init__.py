# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""通用基础设施（错误/日志/trace 等）

约定：
- 检查链与 usecase 不处理错误：一律抛出 AppError 子类，由 exception_handlers 统一转为 {"error": message}
- trace_id 通过 middleware 注入，并写入日志
"""

from __future__ import annotations
