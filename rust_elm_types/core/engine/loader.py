"""Loader: YAML→IR変換

永続化された仕様（YAML/JSON）を読み込み、IRに変換する。
逆方向（IR→YAML）のダンプも提供する。
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TextIO

import yaml
from pydantic import ValidationError

from rust_elm_types.cli_file_io import FileOrStdin
from rust_elm_types.core.base.ir import ModuleSpec
from rust_elm_types.core.engine.spec_model import SpecDocument, module_to_data

SUPPORTED_SUFFIXES = {".yaml", ".yml", ".json"}


class SpecFormatError(ValueError):
    """仕様ドキュメントの形式エラー"""


BOOL_TAG = "tag:yaml.org,2002:bool"


class SpecLoader(yaml.SafeLoader):
    """真偽値をYAML 1.2の規則（true/falseのみ）で解決するSafeLoader

    YAML 1.1の yes/no/on/off はバリアント名として使えるよう文字列のまま残す。
    """


SpecLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
SpecLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def load_spec(source: str | Path | TextIO) -> ModuleSpec:
    """YAML/JSON仕様を読み込み、IRに変換

    Args:
        source: 仕様ファイルのパス、または読み込み可能なストリーム

    Returns:
        ModuleSpec: モジュールIR

    Raises:
        SpecFormatError: 未対応のファイル形式、またはドキュメントの形式が不正
        OSError: ファイルを開けない、またはUTF-8として復号できない
    """
    if not isinstance(source, (str, Path)):
        return parse_spec(source.read())

    spec_path = Path(source)
    if spec_path.suffix not in SUPPORTED_SUFFIXES:
        raise SpecFormatError(f"未対応のファイル形式: {spec_path.suffix}")
    with FileOrStdin.from_path(spec_path) as reader:
        return parse_spec(reader.read())


def parse_spec(text: str) -> ModuleSpec:
    """仕様テキスト（YAML、JSONはYAMLのサブセットとして扱う）をIRに変換

    Raises:
        SpecFormatError: YAMLとして解析できない、またはスキーマに合致しない
    """
    try:
        data = yaml.load(text, Loader=SpecLoader)
    except yaml.YAMLError as e:
        raise SpecFormatError(f"YAMLの解析に失敗しました: {e}") from e

    # 空ドキュメントは空のモジュールとして扱う
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SpecFormatError(f"仕様のルートはマッピングである必要があります: {type(data).__name__}")

    try:
        document = SpecDocument.model_validate(data)
    except ValidationError as e:
        raise SpecFormatError(f"仕様の形式が不正です: {e}") from e

    return document.to_ir()


def dump_spec(spec: ModuleSpec) -> str:
    """IRをYAML文字列に変換"""
    return yaml.safe_dump(module_to_data(spec), sort_keys=False, allow_unicode=True)
