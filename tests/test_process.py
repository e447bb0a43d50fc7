import sys
from io import BytesIO
from pathlib import Path
from subprocess import CalledProcessError

from gocpp.building.process import run

INTERLEAVED = """\
import sys
for i in range(2000):
    sys.stdout.write(f"out {i:05d} " + "o" * 100 + "\\n")
    sys.stderr.write(f"err {i:05d} " + "e" * 100 + "\\n")
    if i % 100 == 0:
        sys.stdout.flush()
        sys.stderr.flush()
"""


def _expected(prefix: str, filler: str) -> bytes:
    return "".join(
        f"{prefix} {i:05d} " + filler * 100 + "\n" for i in range(2000)
    ).encode()


def test_forwards_both_streams_losslessly() -> None:
    stdout, stderr = BytesIO(), BytesIO()

    outcome = run(sys.executable, "-c", INTERLEAVED, stdout=stdout, stderr=stderr)

    assert outcome.ok
    assert outcome.error is None
    assert stdout.getvalue() == _expected("out", "o")
    assert stderr.getvalue() == _expected("err", "e")


def test_large_output_does_not_deadlock() -> None:
    stdout, stderr = BytesIO(), BytesIO()
    code = (
        "import sys; sys.stdout.buffer.write(b'x' * 4_000_000);"
        "sys.stderr.buffer.write(b'y' * 4_000_000)"
    )

    outcome = run(sys.executable, "-c", code, stdout=stdout, stderr=stderr)

    assert outcome.ok
    assert stdout.getvalue() == b"x" * 4_000_000
    assert stderr.getvalue() == b"y" * 4_000_000


def test_non_zero_exit_fails_with_cause() -> None:
    stdout, stderr = BytesIO(), BytesIO()

    outcome = run(
        sys.executable,
        "-c",
        "import sys; print('partial'); sys.exit(4)",
        stdout=stdout,
        stderr=stderr,
    )

    assert not outcome.ok
    assert isinstance(outcome.error, CalledProcessError)
    assert outcome.error.returncode == 4
    assert stdout.getvalue().strip() == b"partial"


def test_launch_failure_fails_with_cause(tmp_path: Path) -> None:
    outcome = run(tmp_path / "does-not-exist", stdout=BytesIO(), stderr=BytesIO())

    assert not outcome.ok
    assert isinstance(outcome.error, OSError)


def test_runs_in_given_directory(tmp_path: Path) -> None:
    stdout = BytesIO()

    outcome = run(
        sys.executable,
        "-c",
        "import os; print(os.getcwd(), end='')",
        cwd=tmp_path,
        stdout=stdout,
        stderr=BytesIO(),
    )

    assert outcome.ok
    assert Path(stdout.getvalue().decode()).resolve() == tmp_path.resolve()


def test_defaults_to_console_streams(capsys) -> None:  # type: ignore[no-untyped-def]
    outcome = run(
        sys.executable,
        "-c",
        "import sys; print('to stdout'); print('to stderr', file=sys.stderr)",
    )

    captured = capsys.readouterr()
    assert outcome.ok
    assert "to stdout" in captured.out
    assert "to stderr" in captured.err
