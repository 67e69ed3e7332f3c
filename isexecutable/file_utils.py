import os
from pathlib import Path
from platform import system
from typing import Callable, Optional, Union

from loguru import logger

from isexecutable.posix_utils import is_executable_posix
from isexecutable.windows_utils import is_executable_windows


# POSIX-like runtimes without file permission bits
NO_PERMISSION_SYSTEMS = ("Emscripten", "WASI")

AnyPath = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def exists_check(path: Path) -> bool:
    # no permission concept on the platform: an existing file is executable
    return os.path.isfile(path)


def get_platform_check(current_system: Optional[str] = None) -> Callable[[Path], bool]:
    if current_system is None:
        current_system = system()

    if current_system == "Windows":
        return is_executable_windows
    if current_system not in NO_PERMISSION_SYSTEMS and os.name == "posix":
        return is_executable_posix

    logger.trace(f"No permission bits on '{current_system}', only file existence is checked")
    return exists_check


class ExecutablePath(type(Path())):  # type: ignore[misc]
    """Concrete path of the host OS with `is_executable` check."""

    def is_executable(self) -> bool:
        """Check whether there is an executable file at this path.

        Returns False on any error: missing file, directory, broken symlink,
        insufficient rights to inspect the file etc. The filesystem is queried
        on every call, nothing is cached.
        """
        return get_platform_check()(self)


def is_executable(path: AnyPath) -> bool:
    return ExecutablePath(os.fsdecode(path)).is_executable()
