"""Run external processes while forwarding their output live to the console."""

import sys
from codecs import getincrementaldecoder
from collections.abc import Iterable
from logging import getLogger
from pathlib import Path
from subprocess import PIPE, CalledProcessError, Popen
from threading import Thread
from typing import BinaryIO, Protocol, TextIO

from ..models import PhaseOutcome

_logger = getLogger(__name__)
_chunk_size = 64 * 1024


class BinaryWriter(Protocol):
    def write(self, data: bytes, /) -> object: ...

    def flush(self) -> None: ...


class ProcessRunnerProtocol(Protocol):
    def __call__(
        self,
        command: str | Path,
        *args: str,
        cwd: Path | None = None,
        stdout: BinaryWriter | None = None,
        stderr: BinaryWriter | None = None,
    ) -> PhaseOutcome: ...


class _TextStreamWriter:
    """Write bytes to a text-only stream, decoding them incrementally."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._decoder = getincrementaldecoder("utf8")(errors="replace")

    def write(self, data: bytes, /) -> int:
        return self._stream.write(self._decoder.decode(data))

    def flush(self) -> None:
        self._stream.flush()


def _binary_writer(stream: TextIO) -> BinaryWriter:
    stream.flush()
    buffer = getattr(stream, "buffer", None)
    return _TextStreamWriter(stream) if buffer is None else buffer


def _forward(source: BinaryIO, destination: BinaryWriter) -> None:
    with source:
        while chunk := source.read1(_chunk_size):  # type: ignore[attr-defined]
            destination.write(chunk)
            destination.flush()


def _start_forwarders(
    pairs: Iterable[tuple[BinaryIO, BinaryWriter]], name: str
) -> list[Thread]:
    forwarders = [
        Thread(target=_forward, args=pair, name=f"{name}-{i}", daemon=True)
        for i, pair in enumerate(pairs)
    ]
    for forwarder in forwarders:
        forwarder.start()
    return forwarders


def run(
    command: str | Path,
    *args: str,
    cwd: Path | None = None,
    stdout: BinaryWriter | None = None,
    stderr: BinaryWriter | None = None,
) -> PhaseOutcome:
    """Run `command` until it exits, forwarding its output as it is produced.

    The standard output and standard error of the process are connected to pipes. \
    Each pipe is copied by its own thread, concurrently with the other one and with \
    the process itself, and both copies are over before the exit status is looked at. \
    The output is transported untouched, never interpreted.

    Args:
        command: Executable to run.
        args: Arguments given to the executable.
        cwd: Working directory of the process. Defaults to the current one.
        stdout: Where to copy the standard output. Defaults to the console.
        stderr: Where to copy the standard error. Defaults to the console.

    Returns:
        A successful outcome if the process exited with status 0, a failed one \
        carrying the cause otherwise.
    """
    out = stdout if stdout is not None else _binary_writer(sys.stdout)
    err = stderr if stderr is not None else _binary_writer(sys.stderr)
    try:
        process = Popen([str(command), *args], cwd=cwd, stdout=PIPE, stderr=PIPE)
    except OSError as e:
        _logger.debug(f"Could not start {command}: {e}")
        return PhaseOutcome(False, e)
    with process:
        assert process.stdout is not None
        assert process.stderr is not None
        forwarders = _start_forwarders(
            [(process.stdout, out), (process.stderr, err)], Path(str(command)).name
        )
        for forwarder in forwarders:
            forwarder.join()
        returncode = process.wait()
    if returncode != 0:
        return PhaseOutcome(False, CalledProcessError(returncode, process.args))
    return PhaseOutcome(True)
