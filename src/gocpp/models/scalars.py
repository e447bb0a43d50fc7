"""Model NewTypes and literal types shared by the whole pipeline."""

from typing import Literal, NewType, get_args

Standard = Literal["c++17", "c++20"]
"""C++ language standards the compiler can be asked to follow."""

STANDARDS: tuple[str, ...] = get_args(Standard)

ArtifactName = NewType("ArtifactName", str)
"""Derived from str to represent the file name of a compiled executable."""

UNKNOWN_VERSION = "Unknown"
"""Placeholder displayed when the toolchain version cannot be determined."""
