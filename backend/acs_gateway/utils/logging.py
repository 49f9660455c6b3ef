# backend/acs_gateway/utils/logging.py

"""
アプリ全体のログ設定。

各モジュールは logging.getLogger(__name__) でロガーを取得するだけにして、
ハンドラ・フォーマットの設定はここに集約する。
"""

import logging

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "acs_gateway"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    acs_gateway 配下のロガーにコンソールハンドラを 1 つだけ設定する。

    create_app() が複数回呼ばれてもハンドラが重複しないようにしている。
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(getattr(h, "_acs_gateway", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
        handler._acs_gateway = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
