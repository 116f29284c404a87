"""Add formatter scripts to a project's package.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"
FORMAT_SCRIPTS = {
    "format": "prettier --write .",
    "format:check": "prettier --check .",
}


def patch_package_json(target_dir: Path) -> bool:
    """Set the format scripts in ``target_dir/package.json``.

    Returns False without touching the filesystem when the manifest is missing
    or is not valid JSON. Write failures after a successful parse propagate.
    Existing keys keep their order; json preserves insertion order on both
    load and dump. Values that cannot be written back as valid JSON, such as
    numbers overflowing to infinity, raise ValueError before the file is touched.
    """

    manifest_path = Path(target_dir) / MANIFEST_NAME
    try:
        manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        LOGGER.debug("Unable to read %s: %s", manifest_path, exc)
        LOGGER.info("No package.json found, skipping script addition.")
        return False
    if not isinstance(manifest, dict):
        LOGGER.info("No package.json found, skipping script addition.")
        return False

    scripts = manifest.get("scripts")
    if not isinstance(scripts, dict):
        scripts = manifest["scripts"] = {}
    scripts.update(FORMAT_SCRIPTS)

    manifest_path.write_text(
        json.dumps(manifest, indent=2, ensure_ascii=False, allow_nan=False) + "\n",
        encoding="utf-8",
    )
    LOGGER.info("Added prettier scripts to package.json.")
    return True
