"""ファイル/標準入出力の切り替え

パスが "-" の場合は標準入出力、それ以外はファイルを開く。
標準入出力はcloseしない（所有していないため）。
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

STDIO_FILENAME = "-"


def is_stdio(path: str | Path) -> bool:
    return str(path) == STDIO_FILENAME


def _decode_failure(error: UnicodeDecodeError) -> OSError:
    # 不正なバイト列は入出力エラーとして扱う
    return OSError(f"UTF-8として復号できません: {error}")


class FileOrStdin:
    """読み込み元（ファイルまたは標準入力）"""

    def __init__(self, handle: TextIO, owned: bool = False) -> None:
        self._handle = handle
        self._owned = owned

    @classmethod
    def from_path(cls, path: str | Path) -> FileOrStdin:
        """パスから読み込み元を生成

        Raises:
            OSError: ファイルを開けない
        """
        if is_stdio(path):
            return cls(sys.stdin)
        return cls(open(path, encoding="utf-8"), owned=True)

    def lines(self) -> Iterator[str]:
        """行単位で読み込み（行末の改行は除去）

        Raises:
            OSError: 読み込み失敗、またはUTF-8として復号できない
        """
        try:
            for line in self._handle:
                yield line.rstrip("\r\n")
        except UnicodeDecodeError as e:
            raise _decode_failure(e) from e

    def read(self) -> str:
        """全体を読み込み

        Raises:
            OSError: 読み込み失敗、またはUTF-8として復号できない
        """
        try:
            return self._handle.read()
        except UnicodeDecodeError as e:
            raise _decode_failure(e) from e

    def close(self) -> None:
        if self._owned:
            self._handle.close()

    def __enter__(self) -> FileOrStdin:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class FileOrStdout:
    """書き込み先（ファイルまたは標準出力）"""

    def __init__(self, handle: TextIO, owned: bool = False) -> None:
        self._handle = handle
        self._owned = owned

    @classmethod
    def from_path(cls, path: str | Path) -> FileOrStdout:
        """パスから書き込み先を生成（ファイルは作成・切り詰め）

        Raises:
            OSError: ファイルを作成できない
        """
        if is_stdio(path):
            return cls(sys.stdout)
        return cls(open(path, "w", encoding="utf-8"), owned=True)

    def write_all(self, text: str) -> None:
        self._handle.write(text)

    def flush(self) -> None:
        self._handle.flush()

    def close(self) -> None:
        self.flush()
        if self._owned:
            self._handle.close()

    def __enter__(self) -> FileOrStdout:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
