"""中間表現（IR）データ構造定義

Spec→IR→各バックエンド（Rust/Elm）で共有する中間表現。
全てのノードはイミュータブル（frozen dataclass + tuple）で、
バックエンドは読み取りのみ行う。
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Union

# シリアライズ形式（serdeのadjacently tagged表現）のキー名
DISCRIMINANT_KEY = "var"
PAYLOAD_KEY = "vardata"


def _freeze(items: Iterable) -> tuple:
    """list等をtupleに変換（frozen dataclass用）"""
    return tuple(items)


@dataclass(frozen=True)
class TypePair:
    """バックエンド毎に解決済みの型文字列ペア

    Attributes:
        rust: Rust側の型文字列（"u32", "Vec<u32>" など）
        elm: Elm側の型文字列（空白区切りトークン列、"List Int" など）
    """

    rust: str
    elm: str


@dataclass(frozen=True)
class StructField:
    """構造体フィールド定義"""

    name: str
    data: TypePair


@dataclass(frozen=True)
class UnitData:
    """ペイロードなしのバリアント"""


@dataclass(frozen=True)
class SingleData:
    """単一ペイロードのバリアント"""

    data: TypePair


@dataclass(frozen=True)
class StructData:
    """名前付きフィールドを持つバリアント"""

    fields: tuple[StructField, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", _freeze(self.fields))


# バリアントのペイロード形状（閉じた直和型）
VariantData = Union[UnitData, SingleData, StructData]


@dataclass(frozen=True)
class EnumVariant:
    """Enumバリアント定義"""

    name: str
    data: VariantData = field(default_factory=UnitData)


@dataclass(frozen=True)
class StructType:
    """構造体型定義

    Attributes:
        name: 型名
        fields: フィールド定義（宣言順 = 出力順）
    """

    name: str
    fields: tuple[StructField, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", _freeze(self.fields))


@dataclass(frozen=True)
class EnumType:
    """タグ付きユニオン型定義

    Attributes:
        name: 型名
        variants: バリアント定義（宣言順 = 出力順）
    """

    name: str
    variants: tuple[EnumVariant, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "variants", _freeze(self.variants))


# 型定義（閉じた直和型）
TypeSpec = Union[StructType, EnumType]


@dataclass(frozen=True)
class ModuleSpec:
    """モジュール定義（IRのルート）

    Attributes:
        module: モジュール名（空文字列はレガシーのbareモード）
        types: 型定義（宣言順 = 出力順）
    """

    module: str = ""
    types: tuple[TypeSpec, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", _freeze(self.types))
