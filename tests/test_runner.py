"""Runner（入力→生成→出力）のテスト"""

import logging

import pytest

from rust_elm_types.backends.elm_types import ElmRenderMode
from rust_elm_types.core.base.ir import EnumType, ModuleSpec
from rust_elm_types.core.engine.config_model import DumpOptions, RunOptions
from rust_elm_types.core.engine.loader import SpecFormatError, parse_spec
from rust_elm_types.core.engine.runner import (
    render_target,
    resolve_elm_mode,
    run_dump,
    run_generation,
    warn_empty_enums,
)


def test_resolve_elm_mode():
    """autoはモジュール名から決定し、明示指定はそのまま"""
    assert resolve_elm_mode(ModuleSpec(module=""), "auto") is ElmRenderMode.BARE
    assert resolve_elm_mode(ModuleSpec(module="Api"), "auto") is ElmRenderMode.FULL
    assert resolve_elm_mode(ModuleSpec(module="Api"), "bare") is ElmRenderMode.BARE
    assert resolve_elm_mode(ModuleSpec(module=""), "full") is ElmRenderMode.FULL


def test_render_target_unknown():
    with pytest.raises(ValueError, match="未対応のターゲット"):
        render_target(ModuleSpec(), "python")


def test_run_generation_rust(tmp_path, fixtures_dir):
    """Rustソースと末尾の改行が書き出されること"""
    output = tmp_path / "types.rs"
    run_generation(RunOptions(target="rust", input=str(fixtures_dir / "sample_spec.yaml"), output=str(output)))

    content = output.read_text()
    assert content.endswith("}\n")
    assert "pub struct TestStruct {" in content
    assert "pub enum TestEnum {" in content


def test_run_generation_elm_full(tmp_path, fixtures_dir):
    """モジュール名付きの仕様はFULLモードで出力"""
    output = tmp_path / "Api.elm"
    run_generation(RunOptions(target="elm", input=str(fixtures_dir / "sample_spec.yaml"), output=str(output)))

    content = output.read_text()
    assert content.startswith("module Api exposing (")
    assert "decodeTestEnumQux" in content


def test_run_generation_elm_bare_override(tmp_path, fixtures_dir):
    """--mode bare でモジュール名があってもBAREモード"""
    output = tmp_path / "Api.elm"
    run_generation(
        RunOptions(target="elm", input=str(fixtures_dir / "sample_spec.yaml"), output=str(output), mode="bare")
    )
    assert output.read_text().startswith("type alias TestStruct =")


def test_run_generation_demo(tmp_path):
    """デモ指定では入力を読まずにサンプルを出力"""
    output = tmp_path / "demo.rs"
    run_generation(RunOptions(target="rust", input=str(tmp_path / "missing.yaml"), output=str(output), demo=True))
    assert output.read_text() == (
        "#[derive(Debug, serde::Serialize, serde::Deserialize)]\npub struct TestStruct {\n}\n"
    )


def test_run_generation_missing_input(tmp_path):
    with pytest.raises(OSError):
        run_generation(RunOptions(target="rust", input=str(tmp_path / "missing.yaml"), output=str(tmp_path / "o")))


def test_run_generation_malformed_input(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("types: 3\n")
    with pytest.raises(SpecFormatError):
        run_generation(RunOptions(target="elm", input=str(path), output=str(tmp_path / "o")))


def test_run_dump(tmp_path):
    """サンプル仕様のYAMLが書き出され、再ロード可能"""
    output = tmp_path / "sample.yaml"
    run_dump(DumpOptions(output=str(output)))

    spec = parse_spec(output.read_text())
    assert spec.module == "test_types"
    assert spec.types[0].name == "TestStruct"


def test_warn_empty_enums(caplog):
    """バリアントのないenumを警告"""
    spec = ModuleSpec(module="Api", types=[EnumType(name="Nothing")])
    with caplog.at_level(logging.WARNING, logger="rust_elm_types.core.engine.runner"):
        warn_empty_enums(spec)
    assert "Nothing" in caplog.text


def test_run_options_validation():
    """未知のターゲットはモデル検証で拒否"""
    with pytest.raises(ValueError):
        RunOptions(target="python")
