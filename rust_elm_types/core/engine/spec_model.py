"""
Persisted spec document models (YAML/JSON encoding of the IR)
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import assert_never

from rust_elm_types.core.base.ir import (
    EnumType,
    EnumVariant,
    ModuleSpec,
    SingleData,
    StructData,
    StructField,
    StructType,
    TypePair,
    TypeSpec,
    UnitData,
    VariantData,
)

# ユニットバリアントの永続化表現
UNIT_VARIANT = "None"


class FieldDoc(BaseModel):
    """Struct field: name plus (rust, elm) type text"""

    model_config = ConfigDict(extra="forbid")

    name: str
    data: tuple[str, str]

    def to_ir(self) -> StructField:
        return StructField(name=self.name, data=TypePair(rust=self.data[0], elm=self.data[1]))


class VariantPayloadDoc(BaseModel):
    """Non-unit variant payload; exactly one of Single / Struct"""

    model_config = ConfigDict(extra="forbid")

    Single: tuple[str, str] | None = None
    Struct: list[FieldDoc] | None = None

    @model_validator(mode="after")
    def _exactly_one_shape(self) -> VariantPayloadDoc:
        if (self.Single is None) == (self.Struct is None):
            raise ValueError("variant data must contain exactly one of 'Single' or 'Struct'")
        return self

    def to_ir(self) -> VariantData:
        if self.Single is not None:
            return SingleData(data=TypePair(rust=self.Single[0], elm=self.Single[1]))
        return StructData(fields=[f.to_ir() for f in self.Struct or []])


class VariantDoc(BaseModel):
    """Enum variant"""

    model_config = ConfigDict(extra="forbid")

    name: str
    data: Literal["None"] | VariantPayloadDoc | None = UNIT_VARIANT

    def to_ir(self) -> EnumVariant:
        if isinstance(self.data, VariantPayloadDoc):
            return EnumVariant(name=self.name, data=self.data.to_ir())
        return EnumVariant(name=self.name, data=UnitData())


class StructDoc(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    fields: list[FieldDoc] = Field(default_factory=list)


class EnumDoc(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    variants: list[VariantDoc] = Field(default_factory=list)


class TypeDoc(BaseModel):
    """Type entry; exactly one of Struct / Enum"""

    model_config = ConfigDict(extra="forbid")

    Struct: StructDoc | None = None
    Enum: EnumDoc | None = None

    @model_validator(mode="after")
    def _exactly_one_kind(self) -> TypeDoc:
        if (self.Struct is None) == (self.Enum is None):
            raise ValueError("type entry must contain exactly one of 'Struct' or 'Enum'")
        return self

    def to_ir(self) -> TypeSpec:
        if self.Struct is not None:
            return StructType(name=self.Struct.name, fields=[f.to_ir() for f in self.Struct.fields])
        if self.Enum is not None:
            return EnumType(name=self.Enum.name, variants=[v.to_ir() for v in self.Enum.variants])
        raise ValueError("type entry must contain exactly one of 'Struct' or 'Enum'")


class SpecDocument(BaseModel):
    """Spec document root model"""

    model_config = ConfigDict(extra="forbid")

    module: str = ""
    types: list[TypeDoc] = Field(default_factory=list)

    def to_ir(self) -> ModuleSpec:
        return ModuleSpec(module=self.module, types=[t.to_ir() for t in self.types])


# ==================== IR -> document ====================


def _field_to_data(struct_field: StructField) -> dict[str, Any]:
    return {"name": struct_field.name, "data": [struct_field.data.rust, struct_field.data.elm]}


def _variant_to_data(variant: EnumVariant) -> dict[str, Any]:
    data = variant.data
    if isinstance(data, UnitData):
        payload: Any = UNIT_VARIANT
    elif isinstance(data, SingleData):
        payload = {"Single": [data.data.rust, data.data.elm]}
    elif isinstance(data, StructData):
        payload = {"Struct": [_field_to_data(f) for f in data.fields]}
    else:
        assert_never(data)
    return {"name": variant.name, "data": payload}


def _type_to_data(type_spec: TypeSpec) -> dict[str, Any]:
    if isinstance(type_spec, StructType):
        return {"Struct": {"name": type_spec.name, "fields": [_field_to_data(f) for f in type_spec.fields]}}
    if isinstance(type_spec, EnumType):
        return {"Enum": {"name": type_spec.name, "variants": [_variant_to_data(v) for v in type_spec.variants]}}
    assert_never(type_spec)


def module_to_data(spec: ModuleSpec) -> dict[str, Any]:
    """IRを永続化用のプレーンなdict/listに変換"""
    return {"module": spec.module, "types": [_type_to_data(t) for t in spec.types]}
