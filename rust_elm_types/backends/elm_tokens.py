"""Elm型文字列のトークン解決

空白区切りの型文字列（"List Maybe Int" など）をトークンに分解し、
Json.Decode / Json.Encode の式に変換する。

コンテナ（List/Maybe）はエンコード時の合成方向が異なる:
- List: 接尾位置 `Json.Encode.list <| List.map <inner> <| value`
- Maybe: 接頭位置 `Json.Encode.Extra.maybe <inner> <| value`
合成方向はCONTAINERSテーブルで管理する（キーワードの文字列比較で分岐しない）。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DECODE_PREFIX = "decode"
ENCODE_PREFIX = "encode"


class Composition(Enum):
    """エンコーダの合成方向"""

    PREFIX = "prefix"
    SUFFIX = "suffix"


@dataclass(frozen=True)
class Container:
    """コンテナ型トークンの変換規則

    Attributes:
        decoder: 内側のデコーダを引数に取るデコーダ
        encoder: エンコーダ関数
        composition: エンコード時の合成方向
        mapper: 接尾合成時に要素へエンコーダを適用する関数
    """

    decoder: str
    encoder: str
    composition: Composition
    mapper: str = ""


PRIMITIVES: dict[str, tuple[str, str]] = {
    "String": ("Json.Decode.string", "Json.Encode.string"),
    "Int": ("Json.Decode.int", "Json.Encode.int"),
    "Float": ("Json.Decode.float", "Json.Encode.float"),
    "Bool": ("Json.Decode.bool", "Json.Encode.bool"),
}

CONTAINERS: dict[str, Container] = {
    "List": Container(
        decoder="Json.Decode.list",
        encoder="Json.Encode.list",
        composition=Composition.SUFFIX,
        mapper="List.map",
    ),
    "Maybe": Container(
        decoder="Json.Decode.nullable",
        encoder="Json.Encode.Extra.maybe",
        composition=Composition.PREFIX,
    ),
}


def tokenize(elm_type: str) -> list[str]:
    """型文字列をトークン列に分解

    前後の空白や連続した空白は区切りとして正規化する（"Int " → ["Int"]）。
    """
    return elm_type.split() or [elm_type]


def is_compound(elm_type: str) -> bool:
    """複数トークンからなる型文字列か"""
    return len(tokenize(elm_type)) > 1


def paren(expr: str) -> str:
    """空白を含む式を括弧で囲む"""
    return f"({expr})" if " " in expr else expr


def type_annotation(elm_type: str) -> str:
    """フィールド注釈・バリアントペイロード用の型表記

    複数トークンの型は括弧で囲む（"List Int" → "(List Int)"）。
    空白は正規化したトークン列から組み立て直す。
    """
    normalized = " ".join(tokenize(elm_type))
    if is_compound(elm_type):
        return f"({normalized})"
    return normalized


def decoder_name(type_name: str) -> str:
    return f"{DECODE_PREFIX}{type_name}"


def encoder_name(type_name: str) -> str:
    return f"{ENCODE_PREFIX}{type_name}"


def resolve_decoder(elm_type: str) -> str:
    """型文字列からデコーダ式を生成（左から右へ合成）

    Examples:
        >>> resolve_decoder("List Maybe Int")
        'Json.Decode.list (Json.Decode.nullable Json.Decode.int)'
    """
    return _decoder_for(tokenize(elm_type))


def _decoder_for(tokens: list[str]) -> str:
    head, rest = tokens[0], tokens[1:]
    container = CONTAINERS.get(head)
    if container is not None:
        head_expr = container.decoder
    elif head in PRIMITIVES:
        head_expr = PRIMITIVES[head][0]
    else:
        head_expr = decoder_name(head)

    if not rest:
        return head_expr
    return f"{head_expr} {paren(_decoder_for(rest))}"


def resolve_encoder(elm_type: str) -> str:
    """型文字列からエンコーダ関数式（a -> Json.Encode.Value）を生成"""
    return _encoder_for(tokenize(elm_type))


def _encoder_for(tokens: list[str]) -> str:
    head, rest = tokens[0], tokens[1:]
    container = CONTAINERS.get(head)
    if container is None:
        head_expr = PRIMITIVES[head][1] if head in PRIMITIVES else encoder_name(head)
        if not rest:
            return head_expr
        return f"{head_expr} {paren(_encoder_for(rest))}"

    if not rest:
        return container.encoder
    inner = paren(_encoder_for(rest))
    if container.composition is Composition.PREFIX:
        return f"{container.encoder} {inner}"
    # 関数として渡す位置では関数合成で表現
    return f"{container.encoder} << {container.mapper} {inner}"


def encode_value(elm_type: str, value: str) -> str:
    """値にエンコーダを適用する式を生成

    Examples:
        >>> encode_value("List Int", "record.foo")
        'Json.Encode.list <| List.map Json.Encode.int <| record.foo'
        >>> encode_value("Maybe Int", "value")
        'Json.Encode.Extra.maybe Json.Encode.int <| value'
    """
    tokens = tokenize(elm_type)
    container = CONTAINERS.get(tokens[0])
    if container is not None and container.composition is Composition.SUFFIX and len(tokens) > 1:
        inner = paren(_encoder_for(tokens[1:]))
        return f"{container.encoder} <| {container.mapper} {inner} <| {value}"
    return f"{_encoder_for(tokens)} <| {value}"
