"""Tests for create_taujs.config module."""

import logging

import pytest

from create_taujs.config import (
    DEFAULT_PROJECT_NAME,
    LoggingConfig,
    PackageManager,
    ProjectConfig,
    get_default_log_level,
    validate_project_name,
)
from create_taujs.exceptions import InvalidProjectNameError, ValidationReason


@pytest.mark.parametrize("name", ["demo-app", "my_app", "app2", "a", "0-_-0", DEFAULT_PROJECT_NAME])
def test_validate_project_name_accepts_valid_names(name: str) -> None:
    assert validate_project_name(name) == name


@pytest.mark.parametrize("name", ["Bad Name!", "MyApp", "my app", "my.app", "app/../x", " demo", "ünïcode", "@scope"])
def test_validate_project_name_rejects_invalid_characters(name: str) -> None:
    with pytest.raises(InvalidProjectNameError) as exc_info:
        validate_project_name(name)
    assert exc_info.value.reason is ValidationReason.INVALID_CHARACTERS
    assert "lowercase letters, numbers, hyphens, and underscores" in str(exc_info.value)


@pytest.mark.parametrize("name", ["", None])
def test_validate_project_name_rejects_empty(name: "str | None") -> None:
    with pytest.raises(InvalidProjectNameError) as exc_info:
        validate_project_name(name)
    assert exc_info.value.reason is ValidationReason.EMPTY_NAME
    assert str(exc_info.value) == "Project name is required"


def test_validate_project_name_does_not_normalize() -> None:
    """Trailing newline is not stripped, so the name is rejected."""
    with pytest.raises(InvalidProjectNameError):
        validate_project_name("demo\n")


def test_invalid_project_name_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        validate_project_name("Nope")


def test_project_config_defaults() -> None:
    config = ProjectConfig(project_name="demo")
    assert config.package_manager is PackageManager.NPM
    assert config.install_deps is True


def test_project_config_coerces_package_manager_string() -> None:
    config = ProjectConfig(project_name="demo", package_manager="bun")  # type: ignore[arg-type]
    assert config.package_manager is PackageManager.BUN


def test_project_config_rejects_invalid_name() -> None:
    with pytest.raises(InvalidProjectNameError):
        ProjectConfig(project_name="Bad Name!")


def test_project_config_rejects_unknown_package_manager() -> None:
    with pytest.raises(ValueError):
        ProjectConfig(project_name="demo", package_manager="deno")  # type: ignore[arg-type]


def test_package_manager_order() -> None:
    assert [pm.value for pm in PackageManager] == ["npm", "pnpm", "yarn", "bun"]


@pytest.mark.parametrize(
    ("package_manager", "dev"),
    [
        (PackageManager.NPM, "npm run dev"),
        (PackageManager.PNPM, "pnpm run dev"),
        (PackageManager.YARN, "yarn run dev"),
        (PackageManager.BUN, "bun run dev"),
    ],
)
def test_package_manager_run_command(package_manager: PackageManager, dev: str) -> None:
    assert package_manager.run_command("dev") == dev


def test_package_manager_script_runner() -> None:
    assert PackageManager.NPM.script_runner == "npm run"
    assert PackageManager.PNPM.script_runner == "pnpm"
    assert PackageManager.YARN.script_runner == "yarn"
    assert PackageManager.BUN.script_runner == "bun"


def test_default_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_default_log_level() == "normal"
    monkeypatch.setenv("CREATE_TAUJS_LOG_LEVEL", "QUIET")
    assert get_default_log_level() == "quiet"
    assert LoggingConfig().is_quiet
    monkeypatch.setenv("CREATE_TAUJS_LOG_LEVEL", "loud")
    assert get_default_log_level() == "normal"


def test_logging_config_apply_sets_logger_level() -> None:
    LoggingConfig(level="verbose").apply()
    assert logging.getLogger("create_taujs").level == logging.DEBUG
    LoggingConfig(level="quiet").apply()
    assert logging.getLogger("create_taujs").level == logging.WARNING
    LoggingConfig(level="normal").apply()
    assert logging.getLogger("create_taujs").level == logging.INFO
