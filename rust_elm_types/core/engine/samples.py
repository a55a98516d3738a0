"""デモ用の固定サンプル仕様"""

from __future__ import annotations

from rust_elm_types.core.base.ir import ModuleSpec, StructType


def sample_spec() -> ModuleSpec:
    """フィールドのない構造体を1つだけ持つサンプル"""
    return ModuleSpec(
        module="test_types",
        types=[StructType(name="TestStruct", fields=[])],
    )
