"""Runner: 入力→IR→バックエンド→出力の実行

CLI（argparse版・fire版）から共通で使用する。
エラーは呼び出し元（CLI層）へそのまま伝播させる。
"""

from __future__ import annotations

import logging

from rust_elm_types.backends.elm_types import ElmRenderMode, render_elm
from rust_elm_types.backends.rust_types import render_rust
from rust_elm_types.cli_file_io import FileOrStdin, FileOrStdout
from rust_elm_types.core.base.ir import EnumType, ModuleSpec
from rust_elm_types.core.engine.config_model import DumpOptions, RunOptions
from rust_elm_types.core.engine.loader import dump_spec, parse_spec
from rust_elm_types.core.engine.samples import sample_spec

logger = logging.getLogger(__name__)

_MODES = {
    "bare": ElmRenderMode.BARE,
    "full": ElmRenderMode.FULL,
}


def resolve_elm_mode(spec: ModuleSpec, mode: str) -> ElmRenderMode:
    """モード指定を解決（"auto"はモジュール名から決定）"""
    if mode == "auto":
        return ElmRenderMode.for_module(spec.module)
    return _MODES[mode]


def render_target(spec: ModuleSpec, target: str, mode: str = "auto") -> str:
    """指定ターゲットのソースを生成"""
    if target == "rust":
        return render_rust(spec)
    if target == "elm":
        return render_elm(spec, resolve_elm_mode(spec, mode))
    raise ValueError(f"未対応のターゲット: {target}")


def warn_empty_enums(spec: ModuleSpec) -> None:
    """バリアントのないenumを警告（Elm出力が不完全なテキストになるため）"""
    for type_spec in spec.types:
        if isinstance(type_spec, EnumType) and not type_spec.variants:
            logger.warning(f"Enum '{type_spec.name}' has no variants; its Elm union type will be incomplete")


def run_generation(options: RunOptions) -> None:
    """仕様を読み込み、ターゲットのソースを書き出す

    Raises:
        OSError: 入出力エラー
        SpecFormatError: 仕様ドキュメントの形式エラー
    """
    if options.demo:
        logger.info(f"Rendering built-in sample, writing '{options.output}'")
        spec = sample_spec()
    else:
        logger.info(f"Reading '{options.input}', writing '{options.output}'")
        with FileOrStdin.from_path(options.input) as reader:
            spec = parse_spec(reader.read())

    logger.debug(f"Loaded module '{spec.module}' with {len(spec.types)} type(s)")
    if options.target == "elm":
        warn_empty_enums(spec)

    text = render_target(spec, options.target, options.mode)

    with FileOrStdout.from_path(options.output) as writer:
        writer.write_all(text)
        writer.write_all("\n")


def run_dump(options: DumpOptions) -> None:
    """サンプル仕様をYAMLで書き出す"""
    logger.info(f"Writing sample spec to '{options.output}'")
    with FileOrStdout.from_path(options.output) as writer:
        writer.write_all(dump_spec(sample_spec()))
        writer.write_all("\n")
