# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging

from bloglist.common.logging import setup_logging
from bloglist.domain import models  # noqa: F401
from bloglist.infra.config import Settings
from bloglist.infra.db import Base, create_db_engine

logger = logging.getLogger("bloglist.init_db")


def init_db(settings: Settings | None = None) -> None:
    settings = settings or Settings()
    engine = create_db_engine(settings.DATABASE_URL)
    logger.info("Creating tables on %s ...", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)
    engine.dispose()
    logger.info("Done.")


if __name__ == "__main__":
    setup_logging()
    init_db()
