"""Compile a C++ file, run the produced binary and clean it up.

A run goes through the following states:

    Init -> Compiling -> CompileFailed
                      -> Running -> RunFailed    -> Cleanup -> Done
                                 -> RunSucceeded -> Cleanup -> Done

A failed compilation stops everything: nothing was produced so there is nothing to \
clean. A failed or interrupted run still goes through the cleanup since the build \
itself succeeded.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from logging import getLogger
from pathlib import Path
from shlex import join as shlex_join

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import app_name
from .building.process import ProcessRunnerProtocol
from .building.process import run as process_run
from .building.toolchain import inspect_version, locate
from .configuring.settings import Settings
from .exceptions import CompilationError, ExecutionError, SourceNotFoundError
from .formatting import Style, rule, styled
from .models import ArtifactName, Config, Standard, check_standard

_probe_name = "probe.cpp"


class State(Enum):
    Init = "init"
    Compiling = "compiling"
    CompileFailed = "compile-failed"
    Running = "running"
    RunFailed = "run-failed"
    RunSucceeded = "run-succeeded"
    Cleanup = "cleanup"
    Done = "done"


@dataclass(frozen=True)
class PipelineResult:
    artifact: Path
    kept: bool
    history: tuple[State, ...]


def artifact_name(source: Path) -> ArtifactName:
    """Name the executable compiled from `source`.

    The name is the base name of `source` without its extension, with `.exe` \
    appended on Windows.
    """
    suffix = ".exe" if sys.platform == "win32" else ""
    return ArtifactName(f"{source.stem}{suffix}")


def compile_arguments(config: Config, settings: Settings, artifact: Path) -> list[str]:
    arguments = [f"-std={config.standard}", *settings.warning_flags]
    if config.debug:
        arguments.extend(settings.debug_flags)
    arguments.extend(["-o", str(artifact), str(config.source)])
    return arguments


def toolchain_table(settings: Settings, compiler: Path, standard: Standard) -> Table:
    version = inspect_version(settings.compiler, settings.version_flag)
    flags = " ".join([f"-std={standard}", *settings.warning_flags])
    table = Table(show_header=False, box=None)
    table.add_column(style=Style.Info.value)
    table.add_column()
    table.add_row("🔧 Compiler", escape(f"{settings.compiler} ({compiler})"))
    table.add_row("🛠️ Version", styled(Style.Highlight, version))
    table.add_row("📋 C++ standard", styled(Style.Accent, standard))
    table.add_row("🚩 Compiler flags", styled(Style.Detail, flags))
    return table


def _invocation(artifact: Path) -> str:
    if sys.platform == "win32":
        return str(artifact)
    return f"./{artifact.name}"


class Pipeline:
    def __init__(
        self,
        config: Config,
        settings: Settings,
        runner: ProcessRunnerProtocol = process_run,
        workdir: Path = Path(),
        console: Console | None = None,
    ) -> None:
        self._config = config
        self._settings = settings
        self._runner = runner
        self._workdir = workdir
        self._console = console if console is not None else Console()
        self._logger = getLogger(__name__)
        self.state = State.Init
        self.history = [State.Init]

    def run(self) -> PipelineResult:
        """Go through all the phases, from the toolchain check to the cleanup.

        Raises:
            ToolchainNotFoundError: Raised before anything else if the compiler \
                cannot be found.
            SourceNotFoundError: Raised if the source file does not exist.
            CompilationError: Raised if the compiler fails. No cleanup is done.
            ExecutionError: Raised after the cleanup if the program fails.

        Returns:
            Where the artifact was written, whether it was kept and the states \
            visited.
        """
        compiler = locate(self._settings.compiler)
        self._check_source()
        if self._config.verbose:
            self._log(Style.Notice, "🔍 Verbose mode enabled - tracing commands...")
        self._console.print(
            toolchain_table(self._settings, compiler, self._config.standard)
        )
        artifact = self._workdir / artifact_name(self._config.source)
        self._compile(artifact)
        try:
            executed = self._execute(artifact)
        finally:
            kept = self._cleanup(artifact)
        self._transition(State.Done)
        if not executed:
            msg = f"execution of {artifact.name} failed"
            raise ExecutionError(msg)
        return PipelineResult(artifact, kept, tuple(self.history))

    def _check_source(self) -> None:
        if not self._config.source.exists():
            msg = f"file '{self._config.source}' not found"
            raise SourceNotFoundError(msg)

    def _compile(self, artifact: Path) -> None:
        self._transition(State.Compiling)
        if self._config.debug:
            self._log(Style.Notice, "🐞 Debug mode enabled!")
        else:
            self._log(Style.Accent, "🔨 Compiling with standard optimizations...")
        arguments = compile_arguments(self._config, self._settings, artifact)
        if self._config.verbose:
            command_line = shlex_join([self._settings.compiler, *arguments])
            self._log(Style.Detail, f"Executing: {command_line}")
        outcome = self._runner(self._settings.compiler, *arguments)
        if not outcome.ok:
            self._transition(State.CompileFailed)
            msg = "compilation failed"
            raise CompilationError(msg) from outcome.error
        self._log(Style.Success, "✅ Compilation successful!")

    def _execute(self, artifact: Path) -> bool:
        self._transition(State.Running)
        self._log(Style.Info, f"🚀 Running {artifact.name}...")
        self._console.print(rule(Style.Accent, "📤 Program Output"))
        outcome = self._runner(_invocation(artifact), cwd=self._workdir)
        self._console.print(rule(Style.Accent))
        if outcome.ok:
            self._transition(State.RunSucceeded)
            return True
        self._transition(State.RunFailed)
        self._logger.error(
            styled(Style.Error, f"❌ Program execution failed: {outcome.error}"),
            extra={"markup": True},
        )
        return False

    def _cleanup(self, artifact: Path) -> bool:
        self._transition(State.Cleanup)
        if self._config.keep_artifact:
            self._log(Style.Warning, f"📝 Keeping binary file: {artifact}")
            return True
        self._log(Style.Cleanup, "🧹 Cleaning up...")
        try:
            artifact.unlink()
        except OSError as e:
            if self._config.verbose:
                self._logger.warning(f"Could not remove file: {e}")
            else:
                self._logger.debug(f"Could not remove file: {e}")
        self._log(Style.Success, "✨ All done!")
        return False

    def _transition(self, state: State) -> None:
        self._logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def _log(self, style: Style, message: str) -> None:
        self._logger.info(styled(style, message), extra={"markup": True})


def run(config: Config, settings: Settings) -> PipelineResult:
    return Pipeline(config, settings).run()


def run_check(settings: Settings, standard: str, verbose: bool = False) -> None:
    """Compile and run a small program reporting the standard and compiler it sees.

    The program is written in a temporary directory, where it is compiled and run, so \
    nothing is left behind.

    Args:
        settings: Toolchain settings.
        standard: C++ standard to compile the program with.
        verbose: Trace the commands.
    """
    from importlib.resources import files
    from tempfile import TemporaryDirectory

    probe = files(__package__).joinpath("data", _probe_name).read_bytes()
    with TemporaryDirectory(prefix=f"{app_name}-") as directory:
        workdir = Path(directory)
        source = workdir / _probe_name
        source.write_bytes(probe)
        config = Config.from_options(source, standard, verbose=verbose)
        Pipeline(config, settings, workdir=workdir).run()


def show_toolchain(
    settings: Settings, standard: str, console: Console | None = None
) -> None:
    compiler = locate(settings.compiler)
    table = toolchain_table(settings, compiler, check_standard(standard))
    (console if console is not None else Console()).print(table)
