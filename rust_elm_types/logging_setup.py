"""ロギング設定

CLIの -q / -v オプションからパッケージロガーのレベルを設定する。
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "rust_elm_types"
LOG_FORMAT = "%(levelname)s - %(message)s"


def verbosity_to_level(verbosity: int) -> int:
    """-v の回数をログレベルに変換（0: WARNING, 1: INFO, 2以上: DEBUG）"""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(quiet: bool = False, verbosity: int = 0) -> logging.Logger:
    """パッケージロガーに標準エラー出力のハンドラを設定

    Args:
        quiet: 全てのログを抑制
        verbosity: -v の回数

    Returns:
        設定済みのパッケージロガー
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = False

    if quiet:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.CRITICAL + 1)
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(verbosity_to_level(verbosity))
    return logger
