"""
Run options model for the command line tools
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from rust_elm_types.cli_file_io import STDIO_FILENAME


class RunOptions(BaseModel):
    """Options for a single generation run"""

    target: Literal["rust", "elm"]
    input: str = STDIO_FILENAME
    output: str = STDIO_FILENAME
    mode: Literal["auto", "bare", "full"] = "auto"
    demo: bool = False  # Render the built-in sample instead of reading input
    quiet: bool = False
    verbose: int = Field(default=0, ge=0)


class DumpOptions(BaseModel):
    """Options for dumping the sample spec"""

    output: str = STDIO_FILENAME
    quiet: bool = False
    verbose: int = Field(default=0, ge=0)
