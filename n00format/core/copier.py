"""Copy template trees into a project, asking before overwriting files."""

from __future__ import annotations

import logging
import shutil
import stat
from pathlib import Path
from typing import Callable

from .prompt import OverwriteDecision, ask_overwrite

LOGGER = logging.getLogger(__name__)

PromptFn = Callable[[str], OverwriteDecision]


def destination_exists(path: Path) -> bool:
    """Return True when ``path`` exists; unexpected stat errors propagate."""

    try:
        path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


class TemplateCopier:
    """Recursive copier that threads the "overwrite all" answer through a walk.

    The flag is passed into every recursive call and returned from it, so an
    ``all`` answer given deep in one subdirectory still applies to siblings and
    to directories visited later in the same walk. Files visited before the
    answer are unaffected.
    """

    def __init__(self, prompt: PromptFn | None = None) -> None:
        self.prompt = prompt or ask_overwrite
        self.copied: list[str] = []
        self.skipped: list[str] = []

    def copy(
        self,
        source: Path,
        destination: Path,
        walk_root: Path | None = None,
        overwrite_all: bool = False,
    ) -> bool:
        source = Path(source)
        destination = Path(destination)
        walk_root = Path(walk_root) if walk_root is not None else source

        for src_path in source.iterdir():
            if stat.S_ISDIR(src_path.stat().st_mode):
                overwrite_all = self.copy(
                    src_path, destination, walk_root, overwrite_all
                )
                continue

            relative = src_path.relative_to(walk_root)
            dest_path = destination / relative
            should_copy, overwrite_all = self._resolve(
                relative.as_posix(), dest_path, overwrite_all
            )
            if not should_copy:
                LOGGER.debug("Keeping existing %s", relative.as_posix())
                self.skipped.append(relative.as_posix())
                continue

            if dest_path.is_dir():
                raise IsADirectoryError(
                    f"Cannot copy {relative.as_posix()}: {dest_path} is a directory"
                )
            dest_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src_path, dest_path)
            LOGGER.debug("Copied %s -> %s", src_path, dest_path)
            self.copied.append(relative.as_posix())

        return overwrite_all

    def _resolve(
        self, relative: str, dest_path: Path, overwrite_all: bool
    ) -> tuple[bool, bool]:
        if not destination_exists(dest_path) or overwrite_all:
            return True, overwrite_all
        decision = self.prompt(relative)
        if decision is OverwriteDecision.ALL:
            return True, True
        return decision is OverwriteDecision.YES, overwrite_all


def copy_directory(
    source: Path,
    destination: Path,
    walk_root: Path | None = None,
    overwrite_all: bool = False,
    *,
    prompt: PromptFn | None = None,
) -> bool:
    """Copy ``source`` into ``destination`` and return the final overwrite-all flag."""

    return TemplateCopier(prompt).copy(source, destination, walk_root, overwrite_all)
