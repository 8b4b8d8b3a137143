"""コマンドラインツールの雛形パッケージ。"""

from __future__ import annotations

from modulename.cli import main, main_async
from modulename.config import CommandOptions
from modulename.core import run
from modulename.io_context import IOContext

__all__ = [
    "CommandOptions",
    "IOContext",
    "main",
    "main_async",
    "run",
]
