from bookshelf.core.logger import logger
from bookshelf.db.base import Base
from bookshelf.db.session import engine
from bookshelf import models  # noqa: F401  (tabloları metadata'ya kaydeder)


def init_db(bind=None):
    bind = bind or engine

    logger.info(f"DB INIT STARTED | url={bind.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=bind)
    logger.info("DB TABLES CREATED")
