"""コマンドが実際に行う処理。"""

from __future__ import annotations

import logging

from modulename.config import CommandOptions
from modulename.logging_utils import get_logger, level_for_verbosity

logger = get_logger(__name__)


async def run(options: CommandOptions | None = None) -> None:
    """コマンドの本体処理を非同期で実行する。

    Args:
        options: 処理対象ファイルと冗長度。``None`` なら既定値を使う。

    Raises:
        TypeError: ``options`` が CommandOptions でない場合。
    """

    if options is not None and not isinstance(options, CommandOptions):
        raise TypeError("options must be a CommandOptions")
    options = options or CommandOptions()
    logging.getLogger(__package__).setLevel(level_for_verbosity(options.verbosity))

    logger.debug(
        "処理を開始します: files=%d verbosity=%d",
        len(options.files),
        options.verbosity,
    )
    for name in options.files:
        logger.info("対象ファイル: %s", name)
