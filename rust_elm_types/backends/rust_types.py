"""Rust型定義生成バックエンド

IRからserde属性付きのstruct/enum定義を生成。
インデント深さと可視性（pub）は全ての再帰呼び出しに明示的に渡す。
"""

from __future__ import annotations

from typing_extensions import assert_never

from rust_elm_types.core.base.ir import (
    DISCRIMINANT_KEY,
    PAYLOAD_KEY,
    EnumType,
    EnumVariant,
    ModuleSpec,
    SingleData,
    StructData,
    StructField,
    StructType,
    TypeSpec,
    UnitData,
    VariantData,
)

INDENT = "    "
TYPE_DERIVE_HEADER = "#[derive(Debug, serde::Serialize, serde::Deserialize)]"
ENUM_TAG_HEADER = f'#[serde(tag = "{DISCRIMINANT_KEY}", content = "{PAYLOAD_KEY}")]'


def render_rust(spec: ModuleSpec) -> str:
    """モジュール全体のRustソースを生成

    Args:
        spec: モジュール定義

    Returns:
        型定義を空行区切りで連結した文字列（型がなければ空文字列）
    """
    return "\n\n".join(render_type(type_spec) for type_spec in spec.types)


def render_type(type_spec: TypeSpec) -> str:
    """型定義1件を生成"""
    if isinstance(type_spec, StructType):
        return _render_struct(type_spec)
    if isinstance(type_spec, EnumType):
        return _render_enum(type_spec)
    assert_never(type_spec)


def _render_struct(struct: StructType) -> str:
    fields_fmt = "".join(render_field(f, indent=1, public=True) for f in struct.fields)
    return f"{TYPE_DERIVE_HEADER}\npub struct {struct.name} {{\n{fields_fmt}}}"


def _render_enum(enum: EnumType) -> str:
    variants_fmt = "".join(render_variant(v, indent=1) for v in enum.variants)
    return f"{TYPE_DERIVE_HEADER}\n{ENUM_TAG_HEADER}\npub enum {enum.name} {{\n{variants_fmt}}}"


def render_field(struct_field: StructField, indent: int, public: bool) -> str:
    """フィールド1行を生成（末尾改行付き）

    Args:
        struct_field: フィールド定義
        indent: インデント深さ
        public: pub修飾子を付けるか（enumバリアント内のフィールドは不可）
    """
    visibility = "pub " if public else ""
    return f"{INDENT * indent}{visibility}{struct_field.name}: {struct_field.data.rust},\n"


def render_variant(variant: EnumVariant, indent: int) -> str:
    """バリアント1件を生成（末尾改行付き）"""
    payload = _render_variant_data(variant.data, indent)
    return f"{INDENT * indent}{variant.name}{payload},\n"


def _render_variant_data(data: VariantData, indent: int) -> str:
    if isinstance(data, UnitData):
        return ""
    if isinstance(data, SingleData):
        return f"({data.data.rust})"
    if isinstance(data, StructData):
        # バリアント内のフィールドにはpubを付けられない
        fields_fmt = "".join(render_field(f, indent=indent + 1, public=False) for f in data.fields)
        return f" {{\n{fields_fmt}{INDENT * indent}}}"
    assert_never(data)
