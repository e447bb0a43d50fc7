from functools import reduce
from pathlib import Path
from typing import Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import BaseModel, ConfigDict, ValidationError

from .. import app_name
from ..exceptions import InvalidSettingsError
from ..models import Standard
from ..utils import dirs_hierarchy, load_all_yamls

settings_filename = f"{app_name}.yml"
_user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()


class Settings(BaseModel):
    """Toolchain settings, read from `gocpp.yml` files.

    The file in the user configuration directory is read first, then the one in the \
    current directory. Keys defined in later files override earlier ones.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    compiler: str = "g++"
    version_flag: str = "--version"
    warning_flags: tuple[str, ...] = ("-Wall", "-Wextra")
    debug_flags: tuple[str, ...] = ("-g",)
    default_standard: Standard = "c++20"

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load and merge the settings files relevant to `path`.

        Args:
            path: Directory the command is run from.

        Raises:
            InvalidSettingsError: Raised if a settings file is not a mapping or \
                contains invalid values.

        Returns:
            The merged settings, defaults filling the gaps.
        """
        contents = []
        for content in load_all_yamls(
            d / settings_filename for d in dirs_hierarchy(_user_config_dir, path)
        ):
            if content is None:
                continue
            if not isinstance(content, dict):
                msg = f"{settings_filename} files should contain a mapping"
                raise InvalidSettingsError(msg)
            contents.append(content)
        merged: dict[str, Any] = reduce(lambda a, b: {**a, **b}, contents, {})
        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            msg = f"invalid settings in {settings_filename}:\n{e}"
            raise InvalidSettingsError(msg) from e
