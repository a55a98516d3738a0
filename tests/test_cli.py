"""argparse版CLI・devtestのテスト"""

import io
import logging
import sys

import pytest

from rust_elm_types import cli, devtest
from rust_elm_types.logging_setup import PACKAGE_LOGGER, configure_logging, verbosity_to_level


def _run(main, argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestGenerateCommand:
    """rust-elm-types コマンド"""

    def test_rust_to_stdout(self, capsys, fixtures_dir):
        """標準出力に生成結果と末尾の改行を書き出す"""
        code = _run(cli.main, ["rust", str(fixtures_dir / "sample_spec.yaml")])
        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith("#[derive(Debug, serde::Serialize, serde::Deserialize)]\npub struct TestStruct {")
        assert out.endswith("}\n")

    def test_elm_from_stdin(self, capsys, monkeypatch, fixtures_dir):
        """入力省略時は標準入力から読み込む"""
        monkeypatch.setattr(sys, "stdin", io.StringIO((fixtures_dir / "bare_spec.yaml").read_text()))
        code = _run(cli.main, ["elm"])
        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith("type alias Point =")
        assert "decodePoint" not in out

    def test_elm_full_mode_to_file(self, tmp_path, fixtures_dir):
        """--mode full と -o の組み合わせ"""
        output = tmp_path / "Point.elm"
        code = _run(
            cli.main, ["elm", str(fixtures_dir / "bare_spec.yaml"), "-o", str(output), "--mode", "full"]
        )
        assert code == 0
        assert "decodePoint : Json.Decode.Decoder Point" in output.read_text()

    def test_demo(self, capsys):
        """--demo はサンプル仕様を出力"""
        code = _run(cli.main, ["elm", "--demo"])
        assert code == 0
        assert capsys.readouterr().out.startswith("module test_types exposing (TestStruct, ")

    def test_missing_input_exits_with_error(self, capsys, tmp_path):
        """入力ファイルがなければエラーをログ出力して終了コード1"""
        code = _run(cli.main, ["rust", str(tmp_path / "missing.yaml")])
        assert code == 1
        assert "Program exited:" in capsys.readouterr().err

    def test_quiet_suppresses_error_log(self, capsys, tmp_path):
        """-q でログを抑制（終了コードは1のまま）"""
        code = _run(cli.main, ["-q", "rust", str(tmp_path / "missing.yaml")])
        assert code == 1
        assert capsys.readouterr().err == ""

    def test_malformed_spec_exits_with_error(self, capsys, fixtures_dir):
        code = _run(cli.main, ["elm", str(fixtures_dir / "invalid_spec_both_kinds.yaml")])
        assert code == 1
        assert "Program exited:" in capsys.readouterr().err

    def test_invalid_utf8_input_exits_with_error(self, capsys, tmp_path):
        """UTF-8として不正な入力はエラーをログ出力して終了コード1"""
        path = tmp_path / "bad_utf8.yaml"
        path.write_bytes(b"\xff\xfe")
        code = _run(cli.main, ["rust", str(path)])
        assert code == 1
        assert "Program exited:" in capsys.readouterr().err

    def test_verbose_logs_paths(self, capsys, fixtures_dir):
        """-v で入出力パスをinfoログに出す"""
        spec_path = fixtures_dir / "sample_spec.yaml"
        code = _run(cli.main, ["-v", "rust", str(spec_path)])
        assert code == 0
        assert f"Reading '{spec_path}', writing '-'" in capsys.readouterr().err

    def test_unknown_target_rejected(self):
        """未知のターゲットはargparseで拒否（終了コード2）"""
        assert _run(cli.main, ["python"]) == 2


class TestDevtestCommand:
    """rust-elm-types-devtest コマンド"""

    def test_dump_to_stdout(self, capsys):
        code = _run(devtest.main, [])
        assert code == 0
        assert capsys.readouterr().out == (
            "module: test_types\ntypes:\n- Struct:\n    name: TestStruct\n    fields: []\n\n"
        )

    def test_dump_to_unwritable_path(self, capsys, tmp_path):
        code = _run(devtest.main, ["-o", str(tmp_path / "no-such-dir" / "out.yaml")])
        assert code == 1
        assert "Program exited:" in capsys.readouterr().err


class TestLoggingSetup:
    """ロギング設定"""

    def test_verbosity_levels(self):
        assert verbosity_to_level(0) == logging.WARNING
        assert verbosity_to_level(1) == logging.INFO
        assert verbosity_to_level(2) == logging.DEBUG
        assert verbosity_to_level(5) == logging.DEBUG

    def test_configure_replaces_handlers(self):
        """再設定してもハンドラは1つ"""
        configure_logging(verbosity=1)
        logger = configure_logging(verbosity=2)
        assert logger.name == PACKAGE_LOGGER
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_quiet(self):
        logger = configure_logging(quiet=True, verbosity=3)
        assert not logger.isEnabledFor(logging.CRITICAL)
