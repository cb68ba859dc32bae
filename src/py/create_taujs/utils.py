"""Console output helpers for create-taujs."""

__all__ = (
    "configure_output",
    "console",
    "get_package_path",
    "get_output_config",
    "log_debug",
    "log_fail",
    "log_info",
    "log_success",
    "log_warn",
)

import logging
from importlib.util import find_spec
from pathlib import Path

from rich.console import Console

from create_taujs.config import LoggingConfig

logger = logging.getLogger("create_taujs")

console = Console(highlight=False, soft_wrap=True)

_TICK = "[bold green]✓[/]"
_INFO = "[cyan]•[/]"
_WARN = "[yellow]⚠[/]"
_FAIL = "[red]✖[/]"

_output_config: "LoggingConfig | None" = None


def configure_output(config: LoggingConfig) -> None:
    """Install the console verbosity used by the log helpers.

    Args:
        config: The logging configuration for this run.
    """
    global _output_config  # noqa: PLW0603
    _output_config = config
    config.apply()


def get_output_config() -> LoggingConfig:
    """Return the active logging configuration, creating the default lazily.

    Returns:
        The active LoggingConfig.
    """
    global _output_config  # noqa: PLW0603
    if _output_config is None:
        _output_config = LoggingConfig()
    return _output_config


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed create-taujs package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("create_taujs")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    return Path(__file__).resolve().parent.joinpath(*parts)


def log_success(message: str) -> None:
    """Print a success message with consistent styling."""

    logger.info(message)
    if not get_output_config().is_quiet:
        console.print(f"{_TICK} {message}")


def log_info(message: str) -> None:
    """Print an informational message with consistent styling."""

    logger.info(message)
    if not get_output_config().is_quiet:
        console.print(f"{_INFO} {message}")


def log_warn(message: str) -> None:
    """Print a warning message with consistent styling."""

    logger.warning(message)
    console.print(f"{_WARN} {message}")


def log_fail(message: str) -> None:
    """Print an error message with consistent styling."""

    logger.error(message)
    console.print(f"{_FAIL} {message}")


def log_debug(message: str) -> None:
    """Print a detail line, only shown in verbose mode."""

    logger.debug(message)
    if get_output_config().is_verbose:
        console.print(f"[dim]{message}[/]")
