"""Package manager executors for installing generated project dependencies.

Each supported package manager has an executor class declaring its binary
and install arguments. ``EXECUTORS`` maps every ``PackageManager`` member to
its executor.
"""

import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from create_taujs.config import PackageManager
from create_taujs.exceptions import CreateTaujsError, ExecutableNotFoundError, InstallError
from create_taujs.utils import log_debug

__all__ = (
    "EXECUTORS",
    "BunExecutor",
    "CommandExecutor",
    "InstallOutcome",
    "NodeExecutor",
    "PnpmExecutor",
    "YarnExecutor",
    "get_executor",
    "install_dependencies",
)


@dataclass(frozen=True)
class InstallOutcome:
    """Result of running the package manager install command.

    Attributes:
        success: True when the installer exited with status 0.
        error: The failure cause when ``success`` is False.
    """

    success: bool
    error: "CreateTaujsError | OSError | None" = None


class CommandExecutor:
    """Runs a package manager binary in a project directory."""

    bin_name: ClassVar[str]
    install_args: ClassVar[tuple[str, ...]] = ("install",)

    def __init__(self, executable_path: "Path | str | None" = None) -> None:
        self.executable_path = executable_path

    def _resolve_executable(self) -> str:
        if self.executable_path:
            return str(self.executable_path)
        path = shutil.which(self.bin_name)
        if path is None:
            raise ExecutableNotFoundError(self.bin_name)
        return path

    @property
    def install_command(self) -> list[str]:
        """The install invocation as shown to users (e.g. ``npm install``)."""
        return [self.bin_name, *self.install_args]

    def install(self, cwd: Path) -> None:
        """Install dependencies, streaming output to the current terminal.

        Args:
            cwd: Directory containing the ``package.json``.

        Raises:
            InstallError: If the installer exits with a non-zero status.
        """
        command = [self._resolve_executable(), *self.install_args]
        log_debug(f"Running {' '.join(self.install_command)} in {cwd}")
        process = subprocess.run(
            command,
            cwd=cwd,
            shell=platform.system() == "Windows",
            check=False,
        )
        if process.returncode != 0:
            raise InstallError(command, process.returncode)


class NodeExecutor(CommandExecutor):
    """npm executor."""

    bin_name = "npm"


class PnpmExecutor(CommandExecutor):
    """PNPM executor."""

    bin_name = "pnpm"


class YarnExecutor(CommandExecutor):
    """Yarn executor."""

    bin_name = "yarn"
    install_args = ()


class BunExecutor(CommandExecutor):
    """Bun executor."""

    bin_name = "bun"


EXECUTORS: dict[PackageManager, type[CommandExecutor]] = {
    PackageManager.NPM: NodeExecutor,
    PackageManager.PNPM: PnpmExecutor,
    PackageManager.YARN: YarnExecutor,
    PackageManager.BUN: BunExecutor,
}


def get_executor(package_manager: "PackageManager | str") -> CommandExecutor:
    """Get the executor for a package manager.

    Args:
        package_manager: The package manager (enum or string).

    Returns:
        A new executor instance.
    """
    return EXECUTORS[PackageManager(package_manager)]()


def install_dependencies(package_manager: "PackageManager | str", cwd: Path) -> InstallOutcome:
    """Run the install command for ``package_manager`` inside ``cwd``.

    Failures are returned, not raised: a missing executable, a spawn error or
    a non-zero exit status all produce an unsuccessful outcome.

    Args:
        package_manager: The package manager to use.
        cwd: The generated project directory.

    Returns:
        The install outcome.
    """
    executor = get_executor(package_manager)
    try:
        executor.install(cwd)
    except (InstallError, ExecutableNotFoundError, OSError) as e:
        log_debug(f"Install failed: {e!s}")
        return InstallOutcome(success=False, error=e)
    return InstallOutcome(success=True)
