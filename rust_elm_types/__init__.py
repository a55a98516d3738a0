"""rust_elm_types - スキーマ定義からRust/Elmの型定義を生成"""

from rust_elm_types.backends.elm_types import ElmRenderMode, render_elm
from rust_elm_types.backends.rust_types import render_rust

__version__ = "0.1.0"

__all__ = ["ElmRenderMode", "render_elm", "render_rust", "__version__"]
