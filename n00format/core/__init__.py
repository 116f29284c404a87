"""n00format core package - project formatter setup utilities."""

from .bootstrap import FormatSetupExecutor, SetupResult
from .config import SetupConfig, load_config
from .copier import TemplateCopier, copy_directory
from .errors import ConfigError, InstallError, InstallLaunchError, N00FormatError
from .manifest import FORMAT_SCRIPTS, patch_package_json
from .package_manager import (
    PackageManager,
    build_install_command,
    detect_package_manager,
    install_dependency,
)
from .prompt import ConsolePrompt, OverwriteDecision, ask_overwrite, parse_overwrite_answer

__all__ = [
    "ConfigError",
    "ConsolePrompt",
    "FORMAT_SCRIPTS",
    "FormatSetupExecutor",
    "InstallError",
    "InstallLaunchError",
    "N00FormatError",
    "OverwriteDecision",
    "PackageManager",
    "SetupConfig",
    "SetupResult",
    "TemplateCopier",
    "ask_overwrite",
    "build_install_command",
    "copy_directory",
    "detect_package_manager",
    "install_dependency",
    "load_config",
    "parse_overwrite_answer",
    "patch_package_json",
]
