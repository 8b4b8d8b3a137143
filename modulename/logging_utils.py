"""ロギング設定とロガー取得のユーティリティ。"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

_configured = False
_stream_handler: Optional[logging.StreamHandler] = None


def configure_logging(level: str | int = "WARNING", stream: Optional[TextIO] = None) -> None:
    """ロギング設定を初期化する。

    2 回目以降の呼び出しではレベルと出力先だけを更新する。

    Args:
        level: ログレベル文字列または数値。
        stream: ストリームハンドラの出力先。``None`` なら ``sys.stderr``。
    """

    global _configured, _stream_handler

    root_logger = logging.getLogger()
    level_value = level.upper() if isinstance(level, str) else level
    root_logger.setLevel(level_value)

    if _configured and _stream_handler is not None:
        if stream is not None:
            _stream_handler.setStream(stream)
        return

    stream_handler = logging.StreamHandler(stream)
    stream_handler.setFormatter(_build_formatter())
    root_logger.addHandler(stream_handler)
    _stream_handler = stream_handler
    _configured = True


def _build_formatter() -> logging.Formatter:
    """標準のログフォーマッタを返す。"""

    return logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def level_for_verbosity(verbosity: int) -> int:
    """冗長度をログレベルへ変換する。

    Args:
        verbosity: ``-v`` の回数から ``-q`` の回数を引いた値。

    Returns:
        int: ``logging`` モジュールのレベル値。
    """

    if verbosity <= -1:
        return logging.ERROR
    if verbosity == 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def get_logger(name: str) -> logging.Logger:
    """指定した名前のロガーを返す。

    Args:
        name: ロガー名。

    Returns:
        logging.Logger: 設定済みロガー。
    """

    logger = logging.getLogger(name)
    if not _configured:
        configure_logging()
    # ハンドラはルートロガーにだけ置く。
    logger.propagate = True
    return logger
