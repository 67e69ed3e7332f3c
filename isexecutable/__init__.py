from loguru import logger

from isexecutable.access_utils import ExecuteAccess, check_execute_access
from isexecutable.file_utils import ExecutablePath, is_executable
from isexecutable.posix_utils import is_executable_mode

__all__ = [
    "ExecutablePath",
    "ExecuteAccess",
    "check_execute_access",
    "is_executable",
    "is_executable_mode",
]

# library stays silent unless the application enables it
logger.disable("isexecutable")
