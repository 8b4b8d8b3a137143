"""操作に渡すオプション。"""

from __future__ import annotations

from dataclasses import dataclass

from modulename.options import ParsedOptions


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """操作 (``modulename.core.run``) に渡されるオプション。

    Attributes:
        files: コマンドラインで指定された位置引数。指定順のまま保持する。
        verbosity: 出力の冗長度。``-v`` で +1、``-q`` で -1。
    """

    files: tuple[str, ...] = ()
    verbosity: int = 0

    def __post_init__(self) -> None:
        """値の正規化と検証を行う。"""

        object.__setattr__(self, "files", tuple(self.files))
        if not all(isinstance(name, str) for name in self.files):
            raise TypeError("files must contain only str")
        if isinstance(self.verbosity, bool) or not isinstance(self.verbosity, int):
            raise TypeError("verbosity must be an int")

    @classmethod
    def from_parsed(cls, parsed: ParsedOptions) -> "CommandOptions":
        """パース結果から CommandOptions を生成する。

        Args:
            parsed: コマンドライン引数のパース結果。

        Returns:
            CommandOptions: 操作へ渡す値。
        """

        return cls(files=parsed.files, verbosity=parsed.verbosity)
