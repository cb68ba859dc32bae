"""create-taujs: scaffold a new τjs (taujs) application.

Usage from the command line::

    create-taujs my-app --package-manager pnpm --no-install

Or programmatically::

    from create_taujs import PackageManager, ProjectConfig, create_project

    create_project(ProjectConfig("my-app", PackageManager.PNPM, install_deps=False))
"""

import logging

from create_taujs.commands import create_project
from create_taujs.config import LoggingConfig, PackageManager, ProjectConfig, validate_project_name
from create_taujs.executor import InstallOutcome, install_dependencies
from create_taujs.scaffolding import TEMPLATE_CATALOG, generate_project

logging.getLogger("create_taujs").addHandler(logging.NullHandler())

__all__ = (
    "TEMPLATE_CATALOG",
    "InstallOutcome",
    "LoggingConfig",
    "PackageManager",
    "ProjectConfig",
    "create_project",
    "generate_project",
    "install_dependencies",
    "validate_project_name",
)
