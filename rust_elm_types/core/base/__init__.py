"""rust_elm_types.core.base: IR（中間表現）定義

純粋なデータ定義（最下層）
"""

from .ir import (
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

__all__ = [
    # IR data classes
    "EnumType",
    "EnumVariant",
    "ModuleSpec",
    "SingleData",
    "StructData",
    "StructField",
    "StructType",
    "TypePair",
    # Unions
    "TypeSpec",
    "VariantData",
    "UnitData",
]
