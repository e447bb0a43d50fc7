from typing import Annotated

from cyclopts import Parameter

from . import app


@app.command()
def check(
    *,
    standard: Annotated[str | None, Parameter(name=["--standard", "-s"])] = None,
    verbose: Annotated[bool, Parameter(name=["--verbose", "-v"])] = False,
) -> None:
    """Compile and run a small program to make sure the toolchain works.

    Args:
        standard: C++ standard, c++17 or c++20. Defaults to the configured one
        verbose: Trace the commands that are run

    """
    from pathlib import Path

    from ..configuring.settings import Settings
    from ..pipelines import run_check

    settings = Settings.from_yaml(Path())
    run_check(
        settings,
        standard if standard is not None else settings.default_standard,
        verbose=verbose,
    )
