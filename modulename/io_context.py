"""エントリーポイントに注入する入出力コンテキスト。"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, TextIO

Operation = Callable[[Any], Optional[Awaitable[Any]]]


@dataclass(slots=True)
class IOContext:
    """コマンド実行時の入出力と環境変数。

    ストリームは呼び出し側の所有物で、エントリーポイントは閉じたり
    差し替えたりしない。

    Attributes:
        stdin: 入力ストリーム。エントリーポイント自身は読まない。
        stdout: 出力ストリーム。
        stderr: エラーや状態メッセージの出力先。
        env: 環境変数のマッピング。
        operation: テスト専用。指定すると ``modulename.core.run`` の代わりに呼ばれる。
    """

    stdin: Optional[TextIO]
    stdout: Optional[TextIO]
    stderr: Optional[TextIO]
    env: Mapping[str, str] = field(default_factory=dict)
    operation: Optional[Operation] = None

    @classmethod
    def from_process(cls) -> "IOContext":
        """現在のプロセスの標準入出力と環境変数からコンテキストを作る。"""

        return cls(
            stdin=sys.stdin,
            stdout=sys.stdout,
            stderr=sys.stderr,
            env=dict(os.environ),
        )


def validate_args(args: Any) -> None:
    """コマンドライン引数列の型と長さを検証する。

    Raises:
        TypeError: list/tuple でない、または str 以外の要素を含む場合。
        ValueError: 要素数が 2 未満の場合。
    """

    if not isinstance(args, (list, tuple)):
        raise TypeError("args must be a list or tuple of str")
    if not all(isinstance(arg, str) for arg in args):
        raise TypeError("args must contain only str")
    if len(args) < 2:
        raise ValueError("args must have at least 2 items")


def validate_io(io: Any) -> None:
    """入出力コンテキストを検証する。検証順はフィールドの宣言順。

    Raises:
        TypeError: コンテキストや各ストリームが要件を満たさない場合。
    """

    if io is None or not isinstance(io, IOContext):
        raise TypeError("io must be an IOContext")
    if not callable(getattr(io.stdin, "read", None)):
        raise TypeError("io.stdin must be a readable stream")
    if not callable(getattr(io.stdout, "write", None)):
        raise TypeError("io.stdout must be a writable stream")
    if not callable(getattr(io.stderr, "write", None)):
        raise TypeError("io.stderr must be a writable stream")
    if not isinstance(io.env, Mapping):
        raise TypeError("io.env must be a mapping")
    if io.operation is not None and not callable(io.operation):
        raise TypeError("io.operation must be callable")
