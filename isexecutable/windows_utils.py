import ctypes
import os
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger


PATHEXT_ENV_VAR = "PATHEXT"


class BinaryType(IntEnum):
    """Executable kinds reported by GetBinaryTypeW."""

    SCS_32BIT_BINARY = 0
    SCS_DOS_BINARY = 1
    SCS_WOW_BINARY = 2
    SCS_PIF_BINARY = 3
    SCS_POSIX_BINARY = 4
    SCS_OS216_BINARY = 5
    SCS_64BIT_BINARY = 6


def parse_pathext(value: str) -> List[str]:
    """Parse PATHEXT-like value into list of extensions without leading dot.

    Args:
        value (str): semicolon separated list, e.g. '.COM;.EXE;.BAT;.CMD'

    Returns:
        List[str]: extensions in original order, e.g. ['COM', 'EXE', 'BAT', 'CMD']
    """
    extensions: List[str] = []
    # entries of length 1 are empty tokens or a lone dot after a trailing ';'
    for entry in value.split(";"):
        if len(entry) <= 1:
            continue
        if entry.startswith("."):
            entry = entry[1:]
        extensions.append(entry)
    return extensions


def get_extension(path: Path) -> Optional[str]:
    # names like '.bashrc' have no extension, 'app.' has an empty one
    stem, dot, extension = path.name.rpartition(".")
    if dot == "" or stem == "":
        return None
    return extension


@lru_cache(maxsize=None)
def _load_get_binary_type_w() -> Callable[..., int]:
    # own handle, separate from ctypes.windll.kernel32
    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)  # type: ignore[attr-defined]
    get_binary_type_w = kernel32.GetBinaryTypeW
    get_binary_type_w.argtypes = [ctypes.c_wchar_p, ctypes.POINTER(ctypes.c_ulong)]
    get_binary_type_w.restype = ctypes.c_int
    return get_binary_type_w


def get_binary_type(path: Path) -> Optional[BinaryType]:
    try:
        get_binary_type_w = _load_get_binary_type_w()
    except (AttributeError, OSError) as error:
        logger.trace(f"GetBinaryTypeW is not available: {error}")
        return None

    binary_type = ctypes.c_ulong(0)
    try:
        succeeded = get_binary_type_w(str(path), ctypes.byref(binary_type))
    except (OSError, ValueError) as error:
        logger.trace(f"GetBinaryTypeW failed for '{path}': {error}")
        return None
    if not succeeded:
        logger.trace(f"'{path}' is not an executable binary")
        return None

    try:
        return BinaryType(binary_type.value)
    except ValueError:
        logger.trace(f"Unknown binary type {binary_type.value} of '{path}'")
        return None


def is_executable_windows(path: Path) -> bool:
    pathext = os.environ.get(PATHEXT_ENV_VAR)
    extension = get_extension(path)
    if pathext and extension is not None:
        # extension decides alone, binary type is not queried on mismatch
        extension = extension.lower()
        matches = any(
            extension == allowed.lower() for allowed in parse_pathext(pathext)
        )
        if not matches:
            logger.trace(f"Extension of '{path}' is not in {PATHEXT_ENV_VAR}")
            return False
        return os.path.isfile(path)

    return get_binary_type(path) is not None
