"""Configuration for a single scaffolding run."""

import logging
import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from create_taujs.exceptions import InvalidProjectNameError, ValidationReason

__all__ = (
    "DEFAULT_PROJECT_NAME",
    "DOCS_URL",
    "LoggingConfig",
    "PackageManager",
    "ProjectConfig",
    "get_default_log_level",
    "validate_project_name",
)

logger = logging.getLogger("create_taujs")

DEFAULT_PROJECT_NAME = "my-taujs-app"
DOCS_URL = "https://taujs.dev"

_PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9_-]+$")


class PackageManager(str, Enum):
    """Supported JavaScript package managers, in prompt order."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"

    @property
    def script_runner(self) -> str:
        """Prefix used to run a package script in generated docs."""
        return "npm run" if self is PackageManager.NPM else self.value

    def run_command(self, script: str) -> str:
        """Command shown to the user to run a package script.

        Args:
            script: The script name from ``package.json``.

        Returns:
            The command string, e.g. ``pnpm run dev``.
        """
        return f"{self.value} run {script}"


def validate_project_name(candidate: "str | None") -> str:
    """Validate a candidate project name.

    The name is returned unchanged; trimming and case folding are left to
    the caller.

    Args:
        candidate: The proposed project name.

    Raises:
        InvalidProjectNameError: If the name is empty or contains characters
            outside ``[a-z0-9-_]``.

    Returns:
        The validated project name.
    """
    if not candidate:
        raise InvalidProjectNameError(ValidationReason.EMPTY_NAME)
    if not _PROJECT_NAME_PATTERN.fullmatch(candidate):
        raise InvalidProjectNameError(ValidationReason.INVALID_CHARACTERS)
    return candidate


@dataclass(frozen=True)
class ProjectConfig:
    """Validated answers for a scaffolding run.

    Attributes:
        project_name: Directory name and ``package.json`` name.
        package_manager: Package manager used for install and shown in next steps.
        install_deps: Whether to run the package manager after generating files.
    """

    project_name: str
    package_manager: PackageManager = PackageManager.NPM
    install_deps: bool = True

    def __post_init__(self) -> None:
        validate_project_name(self.project_name)
        if not isinstance(self.package_manager, PackageManager):
            object.__setattr__(self, "package_manager", PackageManager(self.package_manager))


def get_default_log_level() -> "Literal['quiet', 'normal', 'verbose']":
    """Get default log level from environment variable.

    Checks CREATE_TAUJS_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv("CREATE_TAUJS_LOG_LEVEL", "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


@dataclass
class LoggingConfig:
    """Console output configuration.

    Attributes:
        level: Output verbosity.
            - "quiet": warnings and errors only
            - "normal": standard progress messages (default)
            - "verbose": also lists every created file and spawned command
            Can also be set via CREATE_TAUJS_LOG_LEVEL environment variable.
    """

    level: "Literal['quiet', 'normal', 'verbose']" = field(default_factory=get_default_log_level)

    @property
    def is_quiet(self) -> bool:
        return self.level == "quiet"

    @property
    def is_verbose(self) -> bool:
        return self.level == "verbose"

    def apply(self) -> None:
        """Set the package logger level to match this configuration."""
        levels = {"quiet": logging.WARNING, "normal": logging.INFO, "verbose": logging.DEBUG}
        logger.setLevel(levels[self.level])
