#!/usr/bin/env python3
"""Add Prettier templates, the Tailwind plugin and format scripts to a project."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from n00format.core import FormatSetupExecutor, PackageManager, load_config
from n00format.core.bootstrap import SetupResult


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[n00format] %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="n00format", description=__doc__)
    parser.add_argument(
        "--target-dir",
        type=Path,
        default=None,
        help="Project directory to set up (defaults to the current directory)",
    )
    parser.add_argument(
        "--templates-dir",
        type=Path,
        help="Directory whose files are copied into the project",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML config file (defaults to <target>/.n00format.yml)",
    )
    parser.add_argument("--package", help="Dev dependency to install")
    parser.add_argument(
        "--package-manager",
        choices=[kind.value for kind in PackageManager],
        help="Skip lock-file detection and use this package manager",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Overwrite existing files without asking",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run the package manager",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def run_setup(args: argparse.Namespace) -> SetupResult:
    target_dir = args.target_dir or Path.cwd()
    config = load_config(target_dir, config_path=args.config).with_overrides(
        templates_dir=args.templates_dir,
        package=args.package,
        package_manager=args.package_manager,
        overwrite_all=True if args.yes else None,
        install=False if args.skip_install else None,
    )
    executor = FormatSetupExecutor(config)
    return asyncio.run(executor.execute())


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        result = run_setup(args)
    except Exception as exc:
        logging.getLogger(__name__).debug("Setup failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if result["skipped"]:
        print(f"[n00format] Kept {len(result['skipped'])} existing file(s):")
        for skipped in result["skipped"]:
            print("  ·", skipped)
    return 0


if __name__ == "__main__":
    sys.exit(main())
