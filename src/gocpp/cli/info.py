from typing import Annotated

from cyclopts import Parameter

from . import app


@app.command()
def info(
    *, standard: Annotated[str | None, Parameter(name=["--standard", "-s"])] = None
) -> None:
    """Print the compiler, its version and the flags that would be used.

    Args:
        standard: C++ standard, c++17 or c++20. Defaults to the configured one

    """
    from pathlib import Path

    from ..configuring.settings import Settings
    from ..pipelines import show_toolchain

    settings = Settings.from_yaml(Path())
    show_toolchain(
        settings, standard if standard is not None else settings.default_standard
    )
