from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from . import app


@app.default
def run(
    source: Path,
    /,
    *,
    standard: Annotated[str | None, Parameter(name=["--standard", "-s"])] = None,
    debug: Annotated[bool, Parameter(name=["--debug", "-d"])] = False,
    verbose: Annotated[bool, Parameter(name=["--verbose", "-v"])] = False,
    keep: Annotated[bool, Parameter(name=["--keep", "-n"])] = False,
) -> None:
    """Compile SOURCE, run the produced binary and delete it.

    Args:
        source: C++ file to compile and run
        standard: C++ standard, c++17 or c++20. Defaults to the configured one
        debug: Compile with debug symbols
        verbose: Trace the commands that are run
        keep: Keep the compiled binary after running it

    """
    from ..configuring.settings import Settings
    from ..models import Config
    from ..pipelines import run

    settings = Settings.from_yaml(Path())
    config = Config.from_options(
        source,
        standard if standard is not None else settings.default_standard,
        debug=debug,
        verbose=verbose,
        keep_artifact=keep,
    )
    run(config, settings)
