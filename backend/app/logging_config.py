import logging
import sys
from typing import Optional
from app.config import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# SQLの出力やアクセスログが多すぎる場合に抑えるロガー
NOISY_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def resolve_level(level_name: Optional[str] = None, debug: Optional[bool] = None) -> int:
    """
    ログレベルを決定する

    LOG_LEVEL が指定されていればそれを使い、なければ DEBUG 設定に従う。
    不明なレベル名の場合は INFO とする。
    """
    if level_name is None:
        level_name = config.get("app", "LOG_LEVEL")
    if level_name:
        level = logging.getLevelName(level_name.upper())
        return level if isinstance(level, int) else logging.INFO
    if debug is None:
        debug = config.get("app", "DEBUG")
    return logging.DEBUG if debug else logging.INFO


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """アプリケーションのロギング設定をセットアップし、app ロガーを返す"""
    if level is None:
        level = resolve_level()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    for name, noisy_level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(max(noisy_level, level))

    app_logger = logging.getLogger("app")
    app_logger.setLevel(level)
    return app_logger

logger = setup_logging()
