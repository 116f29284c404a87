"""Detect the project's package manager and install dev dependencies with it."""

from __future__ import annotations

import asyncio
import logging
import os
from enum import Enum
from pathlib import Path

from .errors import InstallError, InstallLaunchError

LOGGER = logging.getLogger(__name__)


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


# Checked in order; the first marker present wins.
LOCKFILE_MARKERS: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
)

INSTALL_COMMANDS: dict[PackageManager, tuple[str, ...]] = {
    PackageManager.NPM: ("npm", "install", "--save-dev"),
    PackageManager.YARN: ("yarn", "add", "--dev"),
    PackageManager.PNPM: ("pnpm", "add", "--save-dev"),
}


def _marker_present(path: Path) -> bool:
    return os.path.exists(path)


def detect_package_manager(target_dir: Path) -> PackageManager:
    for marker, kind in LOCKFILE_MARKERS:
        if _marker_present(Path(target_dir) / marker):
            LOGGER.debug("Found %s, using %s", marker, kind.value)
            return kind
    return PackageManager.NPM


def build_install_command(kind: PackageManager | str, package: str) -> list[str]:
    return [*INSTALL_COMMANDS[PackageManager(kind)], package]


async def install_dependency(
    kind: PackageManager | str,
    package: str,
    *,
    cwd: Path | None = None,
) -> None:
    """Add ``package`` as a dev dependency, streaming the tool's output live.

    Raises ``InstallLaunchError`` when the program cannot be started and
    ``InstallError`` when it exits with a non-zero status.
    """

    kind = PackageManager(kind)
    program, *args = build_install_command(kind, package)
    LOGGER.info("Installing %s with %s...", package, kind.value)
    try:
        process = await asyncio.create_subprocess_exec(program, *args, cwd=cwd)
    except OSError as exc:
        raise InstallLaunchError(program, exc) from exc

    returncode = await process.wait()
    if returncode != 0:
        raise InstallError(returncode)
