from pathlib import Path
from typing import Self, cast

from pydantic import BaseModel, ConfigDict

from ..exceptions import InvalidStandardError
from .scalars import STANDARDS, Standard


def check_standard(standard: str) -> Standard:
    """Make sure `standard` is one of the supported C++ standards.

    Raises:
        InvalidStandardError: Raised if it is not.
    """
    if standard not in STANDARDS:
        supported = " or ".join(f"'{s}'" for s in STANDARDS)
        msg = f"invalid C++ standard '{standard}'. Use {supported}"
        raise InvalidStandardError(msg)
    return cast(Standard, standard)


class Config(BaseModel):
    """Options of a single build, run and cleanup invocation.

    Built once from the command line and shared read-only by every phase.
    """

    model_config = ConfigDict(frozen=True)

    source: Path
    standard: Standard = "c++20"
    debug: bool = False
    verbose: bool = False
    keep_artifact: bool = False

    @classmethod
    def from_options(
        cls,
        source: Path,
        standard: str,
        debug: bool = False,
        verbose: bool = False,
        keep_artifact: bool = False,
    ) -> Self:
        """Build a configuration, checking the standard against the supported ones.

        Args:
            source: Path of the C++ file to compile.
            standard: C++ standard given by the user.
            debug: Compile with debug symbols.
            verbose: Trace the commands and report cleanup problems.
            keep_artifact: Leave the compiled binary in place after running it.

        Raises:
            InvalidStandardError: Raised if `standard` is not a supported standard.

        Returns:
            The validated configuration.
        """
        return cls(
            source=source,
            standard=check_standard(standard),
            debug=debug,
            verbose=verbose,
            keep_artifact=keep_artifact,
        )
