"""pytest設定とフィクスチャ定義"""

import logging
from pathlib import Path

import pytest

from rust_elm_types.core.base.ir import (
    EnumType,
    EnumVariant,
    ModuleSpec,
    SingleData,
    StructData,
    StructField,
    StructType,
    TypePair,
    UnitData,
)
from rust_elm_types.logging_setup import PACKAGE_LOGGER

REPO_ROOT = Path(__file__).parent.parent
FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_field(name: str, rust: str, elm: str) -> StructField:
    return StructField(name=name, data=TypePair(rust=rust, elm=elm))


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def struct_simple() -> StructType:
    """2フィールドの構造体"""
    return StructType(
        name="TestStruct",
        fields=[
            make_field("foo", "u32", "Int"),
            make_field("bar", "String", "String"),
        ],
    )


@pytest.fixture
def enum_complex() -> EnumType:
    """ユニット・単一・名前付きフィールドの3種のバリアントを持つenum"""
    return EnumType(
        name="TestEnum",
        variants=[
            EnumVariant(name="Foo", data=UnitData()),
            EnumVariant(name="Bar", data=SingleData(TypePair(rust="bool", elm="Bool"))),
            EnumVariant(
                name="Qux",
                data=StructData(
                    fields=[
                        make_field("sub1", "u32", "Int"),
                        make_field("sub2", "String", "String"),
                    ]
                ),
            ),
        ],
    )


@pytest.fixture
def point_module() -> ModuleSpec:
    return ModuleSpec(
        module="M",
        types=[
            StructType(
                name="Point",
                fields=[make_field("x", "u32", "Int"), make_field("y", "u32", "Int")],
            )
        ],
    )


@pytest.fixture
def shape_module() -> ModuleSpec:
    """名前付きフィールドのバリアントを持つShape"""
    return ModuleSpec(
        module="Shapes",
        types=[
            EnumType(
                name="Shape",
                variants=[
                    EnumVariant(name="Circle", data=StructData(fields=[make_field("radius", "f64", "Float")])),
                    EnumVariant(name="Unit", data=UnitData()),
                ],
            )
        ],
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """configure_logging の設定をテスト毎に元に戻す"""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
