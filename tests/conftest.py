import os
from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir(tmp_path: Path) -> Path:
    """Directory with the files the checks are run against."""
    executable = tmp_path / "i_am_executable"
    executable.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(executable, 0o755)

    not_executable = tmp_path / "i_am_not_executable"
    not_executable.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(not_executable, 0o644)

    (tmp_path / "i_am_executable_on_windows.bat").write_text("@echo off\n")
    (tmp_path / "subdir").mkdir()
    return tmp_path


@pytest.fixture
def symlinks_dir(fixtures_dir: Path) -> Path:
    if not hasattr(os, "symlink"):
        pytest.skip("symlinks are not supported")
    (fixtures_dir / "i_am_executable_and_symlink").symlink_to(fixtures_dir / "i_am_executable")
    (fixtures_dir / "i_am_not_executable_and_symlink").symlink_to(
        fixtures_dir / "i_am_not_executable"
    )
    (fixtures_dir / "i_am_dangling_symlink").symlink_to(fixtures_dir / "nothing_here")
    return fixtures_dir
