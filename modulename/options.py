"""コマンドラインオプションの文法定義とパーサー。

トークン列を左から 1 回だけ走査する状態機械として実装している。
``--version`` を見つけた時点で走査を打ち切り、``--help`` や未知オプションは
記録だけして最後に優先順位 (version > help > 未知オプション > 引数過多) で
結果を決める。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Literal, Sequence

OptionKind = Literal["count_down", "count_up", "version", "help"]
OutcomeKind = Literal["ok", "version", "help", "error"]

DEFAULT_DESCRIPTION = "Command description."


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """1 つのフラグオプションの定義。

    Attributes:
        short: ``-q`` のような短い形式。
        long: ``--quiet`` のような長い形式。
        description: ヘルプに表示する説明文。
        kind: 出現時の動作。
    """

    short: str
    long: str
    description: str
    kind: OptionKind

    @property
    def term(self) -> str:
        """ヘルプの左列に表示する ``-q, --quiet`` 形式の文字列。"""

        return f"{self.short}, {self.long}"


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """コマンド全体の文法。

    Attributes:
        name: プログラム名。ヘルプの Usage 行に使う。
        description: コマンドの説明文。
        options: 宣言順のオプション定義。
        max_files: 位置引数の最大数。``None`` なら可変長。
    """

    name: str
    description: str = DEFAULT_DESCRIPTION
    options: tuple[OptionSpec, ...] = ()
    max_files: int | None = None

    def find_long(self, token: str) -> OptionSpec | None:
        for option in self.options:
            if option.long == token:
                return option
        return None

    def find_short(self, token: str) -> OptionSpec | None:
        for option in self.options:
            if option.short == token:
                return option
        return None


@dataclass(frozen=True, slots=True)
class ParsedOptions:
    """パース結果。

    Attributes:
        files: オプション以外のトークン (指定順)。
        verbosity: ``-v`` の回数から ``-q`` の回数を引いた値。
    """

    files: tuple[str, ...] = ()
    verbosity: int = 0


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """パーサーの終端状態。

    Attributes:
        kind: ``ok`` / ``version`` / ``help`` / ``error`` のいずれか。
        options: ``ok`` のときのパース結果。
        message: ``error`` のときに標準エラーへ書く 1 行 (改行なし)。
        exit_code: ``error`` のときの終了コード。
    """

    kind: OutcomeKind
    options: ParsedOptions | None = None
    message: str | None = None
    exit_code: int = 0


def default_options() -> tuple[OptionSpec, ...]:
    """標準のオプション定義を宣言順で返す。"""

    return (
        OptionSpec("-q", "--quiet", "Print less output", "count_down"),
        OptionSpec("-v", "--verbose", "Print more output", "count_up"),
        OptionSpec("-V", "--version", "output the version number", "version"),
        OptionSpec("-h", "--help", "display help for command", "help"),
    )


def default_command_spec(name: str) -> CommandSpec:
    """標準の文法 (``[options] [file...]``) を返す。"""

    return CommandSpec(name=name, options=default_options())


def program_name(path: str) -> str:
    """スクリプトパスからプログラム名 (拡張子なしのベース名) を求める。"""

    stem, _ext = os.path.splitext(os.path.basename(path))
    return stem or path


@dataclass(slots=True)
class _ScanState:
    files: list[str] = field(default_factory=list)
    verbosity: int = 0
    help_requested: bool = False
    unknown: str | None = None
    options_ended: bool = False


def parse_args(tokens: Sequence[str], spec: CommandSpec) -> ParseOutcome:
    """トークン列を文法に従って解釈する。

    Args:
        tokens: プログラム名などを除いたコマンドライン引数。
        spec: コマンドの文法。

    Returns:
        ParseOutcome: 走査の終端状態。例外は送出しない。
    """

    state = _ScanState()
    for token in tokens:
        if state.options_ended or token == "-" or not token.startswith("-"):
            state.files.append(token)
            continue
        if token == "--":
            state.options_ended = True
            continue

        if token.startswith("--"):
            flags = [token]
        else:
            # -vq は -v -q として扱う
            flags = [f"-{letter}" for letter in token[1:]]

        for index, flag in enumerate(flags):
            option = spec.find_long(flag) if flag.startswith("--") else spec.find_short(flag)
            if option is None:
                if state.unknown is None:
                    # 短いフラグは不明な文字からトークン末尾までを報告する
                    state.unknown = flag if flag.startswith("--") else "-" + token[index + 1 :]
                break
            if option.kind == "version":
                return ParseOutcome(kind="version")
            _apply(option, state)

    if state.help_requested:
        return ParseOutcome(kind="help")
    if state.unknown is not None:
        return ParseOutcome(
            kind="error",
            message=f"error: unknown option '{state.unknown}'",
            exit_code=1,
        )
    if spec.max_files is not None and len(state.files) > spec.max_files:
        expected = spec.max_files
        noun = "argument" if expected == 1 else "arguments"
        return ParseOutcome(
            kind="error",
            message=(
                f"error: too many arguments. Expected {expected} {noun} "
                f"but got {len(state.files)}."
            ),
            exit_code=1,
        )

    return ParseOutcome(
        kind="ok",
        options=ParsedOptions(files=tuple(state.files), verbosity=state.verbosity),
    )


def _apply(option: OptionSpec, state: _ScanState) -> None:
    if option.kind == "count_up":
        state.verbosity += 1
    elif option.kind == "count_down":
        state.verbosity -= 1
    elif option.kind == "help":
        state.help_requested = True


def format_help(spec: CommandSpec) -> str:
    """Usage テキストを組み立てる。

    Args:
        spec: コマンドの文法。

    Returns:
        str: 末尾に改行を含むヘルプ全文。
    """

    lines = [f"Usage: {spec.name} [options] [file...]", ""]
    if spec.description:
        lines.extend([spec.description, ""])
    lines.append("Options:")
    width = max((len(option.term) for option in spec.options), default=0)
    for option in spec.options:
        lines.append(f"  {option.term.ljust(width)}  {option.description}")
    return "\n".join(lines) + "\n"
