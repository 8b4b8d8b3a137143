"""modulename CLI エントリーポイント。"""

from __future__ import annotations

import asyncio
import importlib.metadata as _metadata
import inspect
import sys
from typing import Sequence

from dotenv import load_dotenv

from modulename.config import CommandOptions
from modulename.core import run as run_core
from modulename.io_context import IOContext, validate_args, validate_io
from modulename.logging_utils import configure_logging, get_logger
from modulename.options import default_command_spec, format_help, parse_args, program_name

logger = get_logger(__name__)

DIST_NAME = "modulename"


async def main_async(args: Sequence[str], io: IOContext) -> int:
    """コマンドを実行し終了コードを返す。

    ``args`` の先頭 2 要素はインタプリタとスクリプトのパスで、3 番目以降を
    オプションとして解釈する。呼び出し規約違反 (引数やストリームの型が
    不正) の場合だけ例外を送出し、それ以外はすべて終了コードに変換する。

    Args:
        args: コマンドライン引数。
        io: 入出力ストリームと環境変数。

    Returns:
        int: 成功時 0、操作の失敗時 1、パースエラー時はパーサーの終了コード。

    Raises:
        TypeError: ``args`` や ``io`` の型が不正な場合。
        ValueError: ``args`` の要素数が 2 未満の場合。
    """

    validate_args(args)
    validate_io(io)

    spec = default_command_spec(program_name(args[1]))
    outcome = parse_args(args[2:], spec)

    if outcome.kind == "version":
        io.stdout.write(f"{read_version()}\n")
        return 0
    if outcome.kind == "help":
        io.stdout.write(format_help(spec))
        return 0
    if outcome.kind == "error" or outcome.options is None:
        io.stderr.write(f"{outcome.message}\n")
        return outcome.exit_code or 1

    options = CommandOptions.from_parsed(outcome.options)

    operation = io.operation or run_core
    logger.debug(
        "操作を呼び出します: files=%s verbosity=%d", options.files, options.verbosity
    )
    try:
        result = operation(options)
        if inspect.isawaitable(result):
            await result
    except Exception as exc:  # noqa: BLE001
        logger.debug("操作が失敗しました。", exc_info=True)
        io.stderr.write(f"{describe_error(exc)}\n")
        return 1

    return 0


def describe_error(exc: BaseException) -> str:
    """例外を標準エラーに書く 1 行の文字列へ変換する。

    メッセージが空の例外はクラス名で代用する。
    """

    text = str(exc)
    return text if text else exc.__class__.__name__


def read_version() -> str:
    """パッケージメタデータからバージョン文字列を読む。

    未インストールのソースツリーから実行された場合は開発版の文字列を返す。
    """

    try:
        return _metadata.version(DIST_NAME)
    except _metadata.PackageNotFoundError:
        return "0.0.0-dev"


def main(argv: list[str] | None = None, *, prog: str | None = None) -> int:
    """現在のプロセスの標準入出力でコマンドを実行する。

    Args:
        argv: コマンドライン引数。``None`` の場合は ``sys.argv[1:]`` を利用。
        prog: プログラム名。``None`` の場合は ``sys.argv[0]`` から求める。

    Returns:
        int: ``sys.exit`` に渡せる終了コード。
    """

    if argv is None:
        argv = sys.argv[1:]
    script = prog or sys.argv[0] or DIST_NAME

    load_dotenv()
    io = IOContext.from_process()
    configure_logging()

    try:
        return asyncio.run(main_async([sys.executable, script, *argv], io))
    except KeyboardInterrupt:
        logger.warning("ユーザーにより処理が中断されました。")
        return 130


def cli_entry_point() -> None:
    """console_scripts 用のエントリーポイント。"""

    sys.exit(main())
