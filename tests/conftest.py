from os import environ, pathsep
from pathlib import Path
from typing import Any

from pytest import fixture

from gocpp.building import process
from gocpp.building import toolchain as toolchain_module
from gocpp.configuring import settings as settings_module

FAKE_COMPILER = """\
#!/bin/sh
if [ "$1" = "--version" ]; then
    echo "g++ (Fake 1.0) 13.2.0"
    exit 0
fi
while [ $# -gt 0 ]; do
    case "$1" in
        -o) output="$2"; shift 2 ;;
        -*) shift ;;
        *) source="$1"; shift ;;
    esac
done
if grep -q "syntax error" "$source"; then
    echo "$source:1:1: error: expected ';' before '}' token" >&2
    exit 1
fi
cp "$source" "$output" && chmod +x "$output"
"""

HELLO = """\
#!/bin/sh
echo "Hello from $(basename "$0")"
"""

FAILING = """\
#!/bin/sh
echo "about to fail" >&2
exit 3
"""

BROKEN = """\
int main() { return 0 } // syntax error
"""


@fixture
def toolchain(tmp_path: Path, monkeypatch: Any) -> Path:
    """Put a fake g++ first in the search path.

    The fake compiler "compiles" a shell script by copying it to the output path and \
    making it executable.
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    compiler = bin_dir / "g++"
    compiler.write_text(FAKE_COMPILER, encoding="utf8")
    compiler.chmod(0o755)
    monkeypatch.setenv("PATH", f"{bin_dir}{pathsep}{environ.get('PATH', '')}")
    return compiler


@fixture
def no_toolchain(tmp_path: Path, monkeypatch: Any) -> None:
    empty_dir = tmp_path / "empty-bin"
    empty_dir.mkdir()
    monkeypatch.setenv("PATH", str(empty_dir))


@fixture
def working_dir(tmp_path: Path, monkeypatch: Any) -> Path:
    working_dir = tmp_path / "work"
    working_dir.mkdir()
    monkeypatch.chdir(working_dir)
    user_config_dir = tmp_path / "config"
    user_config_dir.mkdir()
    monkeypatch.setattr(settings_module, "_user_config_dir", user_config_dir)
    return working_dir


@fixture
def write_source(working_dir: Path) -> Any:
    def write(name: str, content: str) -> Path:
        path = working_dir / name
        path.write_text(content, encoding="utf8")
        return path

    return write


class SpawnCounter:
    """Count the processes spawned by the toolchain and process modules."""

    def __init__(self, monkeypatch: Any) -> None:
        self.count = 0
        popen = process.Popen
        run = toolchain_module.run

        def counting_popen(*args: Any, **kwargs: Any) -> Any:
            self.count += 1
            return popen(*args, **kwargs)

        def counting_run(*args: Any, **kwargs: Any) -> Any:
            self.count += 1
            return run(*args, **kwargs)

        monkeypatch.setattr(process, "Popen", counting_popen)
        monkeypatch.setattr(toolchain_module, "run", counting_run)


@fixture
def spawns(monkeypatch: Any) -> SpawnCounter:
    return SpawnCounter(monkeypatch)
