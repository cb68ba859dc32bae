import sys
from typing import Optional

from click import UNPROCESSED, Choice, argument, command, option, version_option
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from create_taujs.__metadata__ import __project__, __version__
from create_taujs.commands import create_project
from create_taujs.config import DEFAULT_PROJECT_NAME, LoggingConfig, PackageManager, ProjectConfig, validate_project_name
from create_taujs.exceptions import DestinationExistsError, InvalidProjectNameError, OperationCancelledError
from create_taujs.utils import configure_output, console, log_fail, log_warn

__all__ = ("collect_config", "create_taujs", "parse_project_name")


def parse_project_name(args: "tuple[str, ...] | list[str]") -> "Optional[str]":
    """Return the first argument that is not a flag.

    Args:
        args: Raw positional arguments and unrecognized options.

    Returns:
        The project name, or None when no positional argument was given.
    """
    return next((arg for arg in args if not arg.startswith("-")), None)


def _prompt_for_project_name() -> str:
    while True:
        value = Prompt.ask("Project name", default=DEFAULT_PROJECT_NAME, console=console)
        try:
            return validate_project_name(value)
        except InvalidProjectNameError as e:
            log_fail(str(e))


def _select_project_name(project_name: "Optional[str]", no_prompt: bool) -> str:
    if project_name is not None:
        try:
            return validate_project_name(project_name)
        except InvalidProjectNameError as e:
            if no_prompt:
                raise
            log_warn(f"{escape(repr(project_name))}: {e!s}")
    if no_prompt:
        return DEFAULT_PROJECT_NAME
    return _prompt_for_project_name()


def _select_package_manager(package_manager: "Optional[str]", no_prompt: bool) -> PackageManager:
    if package_manager is not None:
        return PackageManager(package_manager)
    if no_prompt:
        return PackageManager.NPM
    choices = [pm.value for pm in PackageManager]
    return PackageManager(Prompt.ask("Package manager", choices=choices, default=choices[0], console=console))


def _select_install_deps(install_deps: "Optional[bool]", no_prompt: bool) -> bool:
    if install_deps is not None:
        return install_deps
    if no_prompt:
        return True
    return Confirm.ask("Install dependencies now?", default=True, console=console)


def collect_config(
    project_name: "Optional[str]" = None,
    package_manager: "Optional[str]" = None,
    install_deps: "Optional[bool]" = None,
    *,
    no_prompt: bool = False,
) -> ProjectConfig:
    """Build the project configuration from CLI values and interactive prompts.

    Values supplied on the command line skip their prompt. Remaining fields
    are prompted for in order (name, package manager, install), or take
    their defaults when ``no_prompt`` is set.

    Args:
        project_name: Project name from the command line.
        package_manager: Package manager from the command line.
        install_deps: Install preference from the command line.
        no_prompt: Use defaults instead of prompting.

    Raises:
        OperationCancelledError: If the user interrupts a prompt.
        InvalidProjectNameError: If ``no_prompt`` is set and the given name is invalid.

    Returns:
        The validated project configuration.
    """
    try:
        name = _select_project_name(project_name, no_prompt)
        manager = _select_package_manager(package_manager, no_prompt)
        install = _select_install_deps(install_deps, no_prompt)
    except (KeyboardInterrupt, EOFError) as e:
        raise OperationCancelledError from e
    return ProjectConfig(project_name=name, package_manager=manager, install_deps=install)


@command(
    name="create-taujs",
    help="Create a new τjs (taujs) application.",
    context_settings={"ignore_unknown_options": True, "help_option_names": ["-h", "--help"]},
)
@argument("args", nargs=-1, type=UNPROCESSED, metavar="[PROJECT_NAME]")
@option(
    "-p",
    "--package-manager",
    type=Choice([pm.value for pm in PackageManager]),
    help="Package manager used to install dependencies.",
    default=None,
    required=False,
)
@option("--install", help="Install dependencies without asking.", type=bool, default=False, is_flag=True)
@option(
    "--no-install",
    help="Do not execute the installation commands after generating templates.",
    type=bool,
    default=False,
    is_flag=True,
)
@option(
    "-y",
    "--yes",
    "no_prompt",
    help="Do not prompt and use defaults for any value not given on the command line.",
    type=bool,
    default=False,
    is_flag=True,
)
@option(
    "--no-atomic",
    help="Write files directly into the project directory instead of staging them first.",
    type=bool,
    default=False,
    is_flag=True,
)
@option("-v", "--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
@version_option(__version__, prog_name=__project__)
def create_taujs(
    args: "tuple[str, ...]",
    package_manager: "Optional[str]",
    install: bool,
    no_install: bool,
    no_prompt: bool,
    no_atomic: bool,
    verbose: bool,
) -> None:
    """Scaffold a new τjs project."""
    configure_output(LoggingConfig(level="verbose") if verbose else LoggingConfig())
    console.print("\n[cyan]Welcome to τjs (taujs)[/]\n")

    install_deps = False if no_install else True if install else None
    try:
        config = collect_config(parse_project_name(args), package_manager, install_deps, no_prompt=no_prompt)
        create_project(config, atomic=not no_atomic)
    except (OperationCancelledError, DestinationExistsError, InvalidProjectNameError) as e:
        log_fail(escape(str(e)))
        sys.exit(1)
    except Exception as e:  # noqa: BLE001
        log_fail(f"Error creating project: {escape(str(e))}")
        if verbose:
            console.print_exception()
        sys.exit(1)
