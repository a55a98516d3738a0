"""Elm型定義・JSONデコーダ/エンコーダ生成バックエンド

IRから以下を生成する:
- 型宣言（type alias / union type）
- デコーダ（Json.Decode.Pipeline / Json.Decode.oneOf）
- エンコーダ（Json.Encode.object）
- モジュールヘッダ（exposingリスト）と固定のimportブロック

レンダリングモード:
- FULL: モジュールヘッダ + import + 型毎に「宣言・デコーダ・エンコーダ」
- BARE: 型毎に「宣言・エンコーダ」のみ（レガシー出力）

FULLモードでは名前付きフィールドを持つバリアントに対して
補助型 `<Enum名><Variant名>` を合成し、union定義の前に宣言とデコーダを出力する。
"""

from __future__ import annotations

from enum import Enum

from typing_extensions import assert_never

from rust_elm_types.backends.elm_tokens import (
    decoder_name,
    encode_value,
    encoder_name,
    paren,
    resolve_decoder,
    type_annotation,
)
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
)

INDENT = "    "

ELM_IMPORTS = (
    "import Json.Decode",
    "import Json.Decode.Extra exposing (when)",
    "import Json.Decode.Pipeline exposing (decode, required)",
    "import Json.Encode",
    "import Json.Encode.Extra",
)


class ElmRenderMode(Enum):
    """Elm出力モード"""

    BARE = "bare"
    FULL = "full"

    @classmethod
    def for_module(cls, module: str) -> ElmRenderMode:
        """モジュール名からモードを決定（空文字列ならBARE）"""
        return cls.FULL if module else cls.BARE


def render_elm(spec: ModuleSpec, mode: ElmRenderMode | None = None) -> str:
    """モジュール全体のElmソースを生成

    Args:
        spec: モジュール定義
        mode: 出力モード（Noneの場合はモジュール名から決定）

    Returns:
        生成されたElmソース
    """
    if mode is None:
        mode = ElmRenderMode.for_module(spec.module)

    if mode is ElmRenderMode.BARE:
        return "\n\n".join(_render_bare_type(type_spec) for type_spec in spec.types)

    blocks = [render_module_header(spec), "\n".join(ELM_IMPORTS)]
    for type_spec in spec.types:
        blocks.extend(render_type_blocks(type_spec))
    return "\n\n".join(blocks)


def render_module_header(spec: ModuleSpec) -> str:
    """モジュール宣言行を生成"""
    exports = ", ".join(build_exports(spec))
    return f"module {spec.module} exposing ({exports})"


def build_exports(spec: ModuleSpec) -> list[str]:
    """exposingリストを構築

    トップレベルの型毎に「型名（enumはコンストラクタ込み）・デコーダ・エンコーダ」を
    宣言順に並べる。補助型は含めない。
    """
    exports: list[str] = []
    for type_spec in spec.types:
        if isinstance(type_spec, StructType):
            exports.append(type_spec.name)
        elif isinstance(type_spec, EnumType):
            exports.append(f"{type_spec.name}(..)")
        else:
            assert_never(type_spec)
        exports.append(decoder_name(type_spec.name))
        exports.append(encoder_name(type_spec.name))
    return exports


def render_type_blocks(type_spec: TypeSpec) -> list[str]:
    """FULLモードで型1件分の出力ブロックを生成

    enumの場合、名前付きフィールドを持つバリアント毎に補助型の宣言とデコーダを
    バリアント宣言順に先行して出力する。
    """
    if isinstance(type_spec, StructType):
        return [
            render_struct_declaration(type_spec),
            render_struct_decoder(type_spec),
            render_struct_encoder(type_spec),
        ]
    if isinstance(type_spec, EnumType):
        blocks: list[str] = []
        for subsidiary in subsidiary_types(type_spec):
            blocks.append(render_struct_declaration(subsidiary))
            blocks.append(render_struct_decoder(subsidiary))
        blocks.append(render_enum_declaration(type_spec, inline_records=False))
        blocks.append(render_enum_decoder(type_spec))
        blocks.append(render_enum_encoder(type_spec))
        return blocks
    assert_never(type_spec)


def _render_bare_type(type_spec: TypeSpec) -> str:
    if isinstance(type_spec, StructType):
        return f"{render_struct_declaration(type_spec)}\n\n{render_struct_encoder(type_spec)}"
    if isinstance(type_spec, EnumType):
        return f"{render_enum_declaration(type_spec, inline_records=True)}\n\n{render_enum_encoder(type_spec)}"
    assert_never(type_spec)


# ==================== 補助型 ====================


def subsidiary_name(enum: EnumType, variant: EnumVariant) -> str:
    return f"{enum.name}{variant.name}"


def subsidiary_types(enum: EnumType) -> list[StructType]:
    """名前付きフィールドを持つバリアントから補助型を合成"""
    return [
        StructType(name=subsidiary_name(enum, variant), fields=variant.data.fields)
        for variant in enum.variants
        if isinstance(variant.data, StructData)
    ]


# ==================== 型宣言 ====================


def _field_annotation(struct_field: StructField) -> str:
    return f"{struct_field.name}: {type_annotation(struct_field.data.elm)}"


def render_struct_declaration(struct: StructType) -> str:
    if not struct.fields:
        return f"type alias {struct.name} =\n{INDENT}{{}}"

    fields_fmt = f"\n{INDENT}, ".join(_field_annotation(f) for f in struct.fields)
    return f"type alias {struct.name} =\n{INDENT}{{ {fields_fmt}\n{INDENT}}}"


def render_enum_declaration(enum: EnumType, inline_records: bool) -> str:
    """union型宣言を生成

    Args:
        enum: enum定義
        inline_records: 名前付きフィールドをレコードとして埋め込むか（BAREモード）

    Note:
        バリアントのないenumは `= ` のみの不完全なテキストになる（レガシー出力）。
    """
    sep = f"\n{INDENT}| "
    variants_fmt = sep.join(_variant_declaration(enum, v, inline_records) for v in enum.variants)
    return f"type {enum.name}\n{INDENT}= {variants_fmt}"


def _variant_declaration(enum: EnumType, variant: EnumVariant, inline_records: bool) -> str:
    data = variant.data
    if isinstance(data, UnitData):
        return variant.name
    if isinstance(data, SingleData):
        return f"{variant.name} {type_annotation(data.data.elm)}"
    if isinstance(data, StructData):
        if not inline_records:
            return f"{variant.name} {subsidiary_name(enum, variant)}"
        if not data.fields:
            return f"{variant.name} {{}}"
        fields_fmt = ", ".join(_field_annotation(f) for f in data.fields)
        return f"{variant.name} {{ {fields_fmt} }}"
    assert_never(data)


# ==================== デコーダ ====================


def render_struct_decoder(struct: StructType) -> str:
    """パイプライン形式の構造体デコーダを生成"""
    name = decoder_name(struct.name)
    lines = [
        f"{name} : Json.Decode.Decoder {struct.name}",
        f"{name} =",
        f"{INDENT}decode {struct.name}",
    ]
    for f in struct.fields:
        lines.append(f'{INDENT * 2}|> required "{f.name}" {paren(resolve_decoder(f.data.elm))}')
    return "\n".join(lines)


def render_enum_decoder(enum: EnumType) -> str:
    """判別キーで分岐するenumデコーダを生成（先勝ち）"""
    name = decoder_name(enum.name)
    lines = [
        f"{name} : Json.Decode.Decoder {enum.name}",
        f"{name} =",
        f"{INDENT}Json.Decode.oneOf",
    ]
    if not enum.variants:
        lines.append(f"{INDENT * 2}[]")
        return "\n".join(lines)

    for i, variant in enumerate(enum.variants):
        bullet = "[" if i == 0 else ","
        lines.append(
            f'{INDENT * 2}{bullet} when (Json.Decode.field "{DISCRIMINANT_KEY}" Json.Decode.string) '
            f'((==) "{variant.name}") <|'
        )
        lines.append(f"{INDENT * 3}{_variant_decoder(enum, variant)}")
    lines.append(f"{INDENT * 2}]")
    return "\n".join(lines)


def _variant_decoder(enum: EnumType, variant: EnumVariant) -> str:
    data = variant.data
    if isinstance(data, UnitData):
        return f"Json.Decode.succeed {variant.name}"
    if isinstance(data, SingleData):
        payload = paren(resolve_decoder(data.data.elm))
    elif isinstance(data, StructData):
        payload = decoder_name(subsidiary_name(enum, variant))
    else:
        assert_never(data)
    return f'Json.Decode.map {variant.name} (Json.Decode.field "{PAYLOAD_KEY}" {payload})'


# ==================== エンコーダ ====================


def _object_entries(entries: list[str], indent: int) -> list[str]:
    """Json.Encode.objectのリスト部分を行単位で生成"""
    if not entries:
        return [f"{INDENT * indent}[]"]
    lines = [f"{INDENT * indent}{'[' if i == 0 else ','} {entry}" for i, entry in enumerate(entries)]
    lines.append(f"{INDENT * indent}]")
    return lines


def render_struct_encoder(struct: StructType) -> str:
    name = encoder_name(struct.name)
    entries = [f'("{f.name}", {encode_value(f.data.elm, "record." + f.name)})' for f in struct.fields]
    lines = [
        f"{name} : {struct.name} -> Json.Encode.Value",
        f"{name} record =",
        f"{INDENT}Json.Encode.object",
    ]
    lines.extend(_object_entries(entries, indent=2))
    return "\n".join(lines)


def render_enum_encoder(enum: EnumType) -> str:
    """case式によるenumエンコーダを生成

    名前付きフィールドのペイロードは補助型のエンコーダに委譲せず、
    ネストしたJson.Encode.objectとしてインライン展開する。
    """
    name = encoder_name(enum.name)
    lines = [
        f"{name} : {enum.name} -> Json.Encode.Value",
        f"{name} var =",
        f"{INDENT}case var of",
    ]
    for variant in enum.variants:
        lines.extend(_variant_encoder_branch(variant, indent=2))
    return "\n".join(lines)


def _variant_encoder_branch(variant: EnumVariant, indent: int) -> list[str]:
    tag_entry = f'( "{DISCRIMINANT_KEY}", Json.Encode.string "{variant.name}" )'
    data = variant.data

    if isinstance(data, UnitData):
        pattern = variant.name
        body = _object_entries([tag_entry], indent + 2)
    elif isinstance(data, SingleData):
        pattern = f"{variant.name} value"
        payload_entry = f'( "{PAYLOAD_KEY}", {encode_value(data.data.elm, "value")} )'
        body = _object_entries([tag_entry, payload_entry], indent + 2)
    elif isinstance(data, StructData):
        pattern = f"{variant.name} record"
        body = _object_entries([tag_entry], indent + 2)
        body.insert(-1, _nested_object_entry(data.fields, indent + 2))
    else:
        assert_never(data)

    return [
        f"{INDENT * indent}{pattern} ->",
        f"{INDENT * (indent + 1)}Json.Encode.object",
        *body,
    ]


def _nested_object_entry(fields: tuple[StructField, ...], indent: int) -> str:
    """ペイロード用のネストしたオブジェクトエントリ（複数行）を生成"""
    prefix = f'{INDENT * indent}, ( "{PAYLOAD_KEY}", Json.Encode.object'
    if not fields:
        return f"{prefix} [] )"

    entries = [f'( "{f.name}", {encode_value(f.data.elm, "record." + f.name)} )' for f in fields]
    inner = _object_entries(entries, indent + 1)
    inner[-1] = f"{inner[-1]} )"
    return "\n".join([prefix, *inner])
