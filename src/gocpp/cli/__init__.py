from collections.abc import Sequence
from logging import INFO, basicConfig

from cyclopts import App
from rich.logging import RichHandler

from .. import __version__, app_name

app = App(name=app_name, version=__version__)
app.register_install_completion_command()


def main(tokens: Sequence[str] | None = None) -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, tracebacks_show_locals=False)],
    )
    from logging import getLogger
    from sys import exit

    from ..exceptions import GocppError
    from ..utils import import_module_and_submodules

    import_module_and_submodules(__name__)
    try:
        app(tokens)
    except GocppError as e:
        getLogger(__name__).critical(str(e))
        exit(1)
