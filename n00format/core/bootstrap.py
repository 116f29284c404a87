"""Setup executor: copy templates, install the formatter plugin, patch scripts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypedDict

from n00format.observability import record_copy_summary, record_install_outcome

from .config import SetupConfig
from .copier import PromptFn, TemplateCopier
from .errors import InstallError, InstallLaunchError
from .manifest import patch_package_json
from .package_manager import detect_package_manager, install_dependency

LOGGER = logging.getLogger(__name__)


class SetupResult(TypedDict):
    status: str
    target_dir: str
    copied: list[str]
    skipped: list[str]
    overwrite_all: bool
    package_manager: str
    installed: bool
    manifest_patched: bool


class FormatSetupExecutor:
    """Run the setup steps in order; any raised error stops the sequence."""

    def __init__(self, config: SetupConfig, prompt: PromptFn | None = None) -> None:
        self.config = config
        self.prompt = prompt

    async def execute(self) -> SetupResult:
        config = self.config
        target_dir = Path(config.target_dir)

        LOGGER.info("Setting up project templates...")
        copier = TemplateCopier(self.prompt)
        overwrite_all = copier.copy(
            config.templates_dir,
            target_dir,
            config.templates_dir,
            config.overwrite_all,
        )
        record_copy_summary(
            str(config.templates_dir), copier.copied, copier.skipped, overwrite_all
        )
        LOGGER.info("Templates added successfully!")

        package_manager = config.package_manager or detect_package_manager(
            target_dir
        )
        if config.install:
            await self._install(package_manager.value, config.package, target_dir)
        else:
            LOGGER.info(
                "Skipping install of %s (%s detected)",
                config.package,
                package_manager.value,
            )

        patched = patch_package_json(target_dir)

        return {
            "status": "success",
            "target_dir": str(target_dir),
            "copied": list(copier.copied),
            "skipped": list(copier.skipped),
            "overwrite_all": overwrite_all,
            "package_manager": package_manager.value,
            "installed": config.install,
            "manifest_patched": patched,
        }

    async def _install(self, package_manager: str, package: str, cwd: Path) -> None:
        try:
            await install_dependency(package_manager, package, cwd=cwd)
        except InstallError as exc:
            record_install_outcome(package_manager, package, returncode=exc.returncode)
            raise
        except InstallLaunchError as exc:
            record_install_outcome(package_manager, package, error=str(exc.reason))
            raise
        record_install_outcome(package_manager, package, returncode=0)
