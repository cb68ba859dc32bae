"""Project creation workflow.

``create_project`` takes a validated configuration through destination
checks, file generation, the optional dependency install and the final
summary.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from create_taujs.config import DOCS_URL
from create_taujs.exceptions import DestinationExistsError
from create_taujs.executor import get_executor, install_dependencies
from create_taujs.scaffolding import generate_project
from create_taujs.utils import console, log_info, log_success, log_warn

if TYPE_CHECKING:
    from create_taujs.config import ProjectConfig

__all__ = ("create_project", "print_next_steps")


def create_project(config: "ProjectConfig", cwd: "Path | None" = None, *, atomic: bool = True) -> Path:
    """Create a new τjs project from ``config``.

    Dependency installation failures are reported as warnings and do not
    fail the run.

    Args:
        config: The validated project configuration.
        cwd: Directory to create the project in. Defaults to the current directory.
        atomic: Whether to stage files before moving the project into place.

    Raises:
        DestinationExistsError: If the project directory already exists.

    Returns:
        The absolute path of the created project.
    """
    target_dir = Path(cwd or Path.cwd()).resolve() / config.project_name
    if target_dir.exists():
        raise DestinationExistsError(config.project_name)

    log_info(f"Creating project in [bold]{escape(str(target_dir))}[/]...")
    generate_project(target_dir, config, atomic=atomic)
    log_success("Project files created")

    if config.install_deps:
        console.rule(f"[yellow]Installing dependencies with {config.package_manager.value}[/]", align="left")
        outcome = install_dependencies(config.package_manager, target_dir)
        if outcome.success:
            log_success("Dependencies installed")
        else:
            log_warn(f"Failed to install dependencies ({escape(str(outcome.error))}). You can install them manually.")

    print_next_steps(config)
    return target_dir


def print_next_steps(config: "ProjectConfig") -> None:
    """Print the success summary and the commands to run next."""
    package_manager = config.package_manager
    console.print(f"\n[green]✓ Project [bold]{config.project_name}[/bold] created successfully![/]\n")
    console.print("[cyan]Next steps:[/]\n")
    console.print(f"  cd {config.project_name}")
    if not config.install_deps:
        console.print(f"  {' '.join(get_executor(package_manager).install_command)}")
    console.print(f"  {package_manager.run_command('dev')}\n")
    console.print(f"[dim]Documentation: {DOCS_URL}[/]\n")
