import os
from pathlib import Path
from stat import S_ISREG

from loguru import logger


# owner, group and other execute bits
EXECUTE_BITS = 0o111


def is_executable_mode(mode: int) -> bool:
    return mode & EXECUTE_BITS != 0


def is_executable_posix(path: Path) -> bool:
    # os.stat follows symlinks, dangling ones end up in OSError
    try:
        path_stat = os.stat(path)
    except (OSError, ValueError) as error:
        logger.trace(f"Cannot stat '{path}': {error}")
        return False

    if not S_ISREG(path_stat.st_mode):
        logger.trace(f"'{path}' is not a regular file")
        return False

    return is_executable_mode(path_stat.st_mode)
