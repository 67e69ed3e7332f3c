from sys import exit, stderr
from pathlib import Path
from typing import List

import typer
from loguru import logger

from isexecutable.access_utils import ExecuteAccess, check_execute_access
from isexecutable.file_utils import is_executable


app = typer.Typer()

EXIT_CODE_BY_ACCESS = {
    ExecuteAccess.PERMITTED: 0,
    ExecuteAccess.DENIED: 1,
    ExecuteAccess.NOT_FOUND: 2,
}


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(stderr, level="TRACE" if verbose else "INFO")
    logger.enable("isexecutable")


@app.command()
def check(
    paths: List[Path],
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    configure_logging(verbose)
    all_executable = True
    for path in paths:
        if is_executable(path):
            logger.success(f"{path} is executable")
        else:
            logger.error(f"{path} is not executable")
            all_executable = False

    if not all_executable:
        exit(1)


@app.command()
def access(
    path: Path,
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    configure_logging(verbose)
    result = check_execute_access(path)
    if result is ExecuteAccess.PERMITTED:
        logger.success(f"{path}: execution {result.value}")
    else:
        logger.error(f"{path}: execution {result.value}")
    exit(EXIT_CODE_BY_ACCESS[result])


if __name__ == "__main__":
    app()
