import os
from enum import Enum
from pathlib import Path
from stat import S_ISREG, S_IXGRP, S_IXOTH, S_IXUSR
from typing import Set

from loguru import logger

from isexecutable.file_utils import AnyPath, get_platform_check
from isexecutable.posix_utils import is_executable_mode, is_executable_posix


class ExecuteAccess(Enum):
    NOT_FOUND = "not found"
    DENIED = "denied"
    PERMITTED = "permitted"


def _effective_groups() -> Set[int]:
    groups = set(os.getgroups())
    groups.add(os.getegid())
    return groups


def check_execute_access_posix(path: Path) -> ExecuteAccess:
    """Check whether the current process may execute the file at `path`.

    Permission class is selected like the kernel does it: if the effective
    user owns the file only the owner bit counts, otherwise if one of the
    effective groups owns it only the group bit counts, otherwise the other
    bit. Root may execute any regular file with at least one execute bit.

    Args:
        path (Path): path to check, symlinks are followed

    Returns:
        ExecuteAccess: NOT_FOUND if nothing exists at the path (including
                       dangling symlinks), DENIED if the file cannot be
                       inspected, is not a regular file or lacks the bit,
                       PERMITTED otherwise
    """
    try:
        path_stat = os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as error:
        logger.trace(f"'{path}' not found: {error}")
        return ExecuteAccess.NOT_FOUND
    except (OSError, ValueError) as error:
        logger.trace(f"Cannot stat '{path}': {error}")
        return ExecuteAccess.DENIED

    mode = path_stat.st_mode
    if not S_ISREG(mode):
        logger.trace(f"'{path}' is not a regular file")
        return ExecuteAccess.DENIED

    effective_uid = os.geteuid()
    if effective_uid == 0:
        permitted = is_executable_mode(mode)
    elif path_stat.st_uid == effective_uid:
        permitted = bool(mode & S_IXUSR)
    elif path_stat.st_gid in _effective_groups():
        permitted = bool(mode & S_IXGRP)
    else:
        permitted = bool(mode & S_IXOTH)

    return ExecuteAccess.PERMITTED if permitted else ExecuteAccess.DENIED


def check_execute_access(path: AnyPath) -> ExecuteAccess:
    path = Path(os.fsdecode(path))
    platform_check = get_platform_check()
    if platform_check is is_executable_posix:
        return check_execute_access_posix(path)

    # no per-user permission bits to inspect, rely on the generic check
    if not os.path.exists(path):
        return ExecuteAccess.NOT_FOUND
    return ExecuteAccess.PERMITTED if platform_check(path) else ExecuteAccess.DENIED
