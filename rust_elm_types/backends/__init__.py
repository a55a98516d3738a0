"""バックエンド層 - IR→ソーステキスト生成

IRからコード生成を行う純関数群。
各バックエンドはIRのみに依存し、相互に独立している。
"""

from . import elm_tokens, elm_types, rust_types
from .elm_types import ElmRenderMode, render_elm
from .rust_types import render_rust

__all__ = ["elm_tokens", "elm_types", "rust_types", "ElmRenderMode", "render_elm", "render_rust"]
